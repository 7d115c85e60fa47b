"""
Literal HTML templates for the prototype landing page.

Templates are filled with str.format, so literal CSS/JS braces are doubled.
Rich cards start with a newline and pages end at </html> with no trailing
newline, matching the layout of the first generated pages.
"""

RICH_CARD_TEMPLATE = """
        <a href="{url}" class="prototype-card" target="_blank" rel="noopener noreferrer">
          <span class="card-icon">{icon}</span>
          <div class="card-body">
            <h2 class="card-title">{name}</h2>
            <p class="card-description">{description}</p>
            <span class="card-cta">View prototype &rarr;</span>
          </div>
        </a>"""

PLAIN_CARD_TEMPLATE = """        <a href="{url}" class="prototype-card" target="_blank" rel="noopener noreferrer">
          <h2 class="card-title">{slug}</h2>
          <span class="card-url">{url}</span>
        </a>"""

GRID_TEMPLATE = """      <div class="prototypes-grid">
{cards}
      </div>"""

RICH_EMPTY_STATE = (
    '      <div class="empty">No prototypes deployed yet. Create a branch in the prototype repo, '
    'push it, and it will appear here automatically.</div>'
)

PLAIN_EMPTY_STATE = '      <div class="empty">No prototypes deployed yet.</div>'


RICH_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{site_title}</title>
  <style>
    *, *::before, *::after {{ box-sizing: border-box; margin: 0; padding: 0; }}
    body {{
      font-family: system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif;
      background: #f9fafb;
      color: #213547;
      min-height: 100vh;
    }}

    /* Navigation Bar */
    .navbar {{
      position: fixed;
      top: 0; left: 0; right: 0;
      height: 60px;
      background-color: #ffffff;
      border-bottom: 1px solid #e5e7eb;
      z-index: 1000;
      box-shadow: 0 1px 3px rgba(0, 0, 0, 0.08);
    }}
    .nav-container {{
      max-width: 1200px;
      margin: 0 auto;
      height: 100%;
      display: flex;
      align-items: center;
      justify-content: space-between;
      padding: 0 1.5rem;
    }}
    .nav-brand {{
      font-size: 1.4rem;
      font-weight: 700;
      color: #4f46e5;
      text-decoration: none;
      letter-spacing: -0.02em;
    }}
    .nav-brand:hover {{ color: #4338ca; }}
    .nav-links {{
      list-style: none;
      display: flex;
      gap: 2rem;
      align-items: center;
    }}
    .nav-link {{
      color: #4b5563;
      text-decoration: none;
      font-weight: 500;
      font-size: 0.95rem;
      padding: 0.5rem 0;
      position: relative;
      transition: color 0.2s ease;
      display: flex;
      align-items: center;
      gap: 0.25rem;
    }}
    .nav-link:hover {{ color: #4f46e5; }}
    .nav-link::after {{
      content: '';
      position: absolute;
      bottom: 0; left: 0;
      width: 0; height: 2px;
      background-color: #4f46e5;
      border-radius: 1px;
      transition: width 0.2s ease;
    }}
    .nav-link:hover::after {{ width: 100%; }}
    .external-icon {{ font-size: 0.75rem; opacity: 0.6; }}

    /* Mobile toggle */
    .nav-toggle {{
      display: none;
      flex-direction: column;
      justify-content: center;
      gap: 5px;
      width: 36px; height: 36px;
      background: none; border: none;
      cursor: pointer; padding: 4px;
    }}
    .hamburger-line {{
      display: block;
      width: 24px; height: 2px;
      background-color: #374151;
      border-radius: 2px;
      transition: all 0.3s ease;
    }}

    /* Main Content */
    .main-content {{
      margin-top: 60px;
      max-width: 1200px;
      margin-left: auto;
      margin-right: auto;
      padding: 0 1.5rem;
      min-height: calc(100vh - 60px);
    }}

    /* Hero */
    .hero {{
      text-align: center;
      padding: 3rem 1rem 2rem;
    }}
    .hero h1 {{
      font-size: 2.4rem;
      color: #111827;
      font-weight: 700;
      margin-bottom: 0.5rem;
    }}
    .brand-highlight {{ color: #4f46e5; }}
    .hero-subtitle {{
      font-size: 1.1rem;
      color: #6b7280;
      max-width: 500px;
      margin: 0 auto;
      line-height: 1.6;
    }}

    /* Prototypes Section */
    .prototypes-section {{ padding: 1rem 0 3rem; }}
    .prototypes-count {{
      color: #64748b;
      font-size: 0.9rem;
      margin-bottom: 1.25rem;
    }}
    .prototypes-grid {{
      display: grid;
      grid-template-columns: repeat(auto-fill, minmax(300px, 1fr));
      gap: 1.25rem;
    }}
    .prototype-card {{
      display: flex;
      align-items: flex-start;
      gap: 1rem;
      background: #ffffff;
      border: 1px solid #e2e8f0;
      border-radius: 12px;
      padding: 1.5rem;
      text-decoration: none;
      color: inherit;
      transition: all 0.2s ease;
      box-shadow: 0 1px 3px rgba(0, 0, 0, 0.04);
    }}
    .prototype-card:hover {{
      border-color: #4f46e5;
      box-shadow: 0 4px 12px rgba(79, 70, 229, 0.12);
      transform: translateY(-2px);
    }}
    .card-icon {{
      font-size: 2rem;
      flex-shrink: 0;
      line-height: 1;
    }}
    .card-body {{ flex: 1; min-width: 0; }}
    .card-title {{
      font-size: 1.05rem;
      font-weight: 600;
      color: #1e293b;
      margin: 0 0 0.35rem;
    }}
    .card-description {{
      font-size: 0.875rem;
      color: #64748b;
      line-height: 1.5;
      margin: 0 0 0.75rem;
    }}
    .card-cta {{
      font-size: 0.85rem;
      color: #4f46e5;
      font-weight: 500;
    }}
    .prototype-card:hover .card-cta {{ text-decoration: underline; }}
    .empty {{
      text-align: center;
      color: #94a3b8;
      padding: 3rem 1rem;
      background: #ffffff;
      border-radius: 12px;
      border: 1px dashed #cbd5e1;
    }}

    /* Responsive */
    @media (max-width: 768px) {{
      .nav-toggle {{ display: flex; }}
      .nav-links {{
        display: none;
        position: absolute;
        top: 60px; left: 0; right: 0;
        flex-direction: column;
        background-color: #ffffff;
        border-bottom: 1px solid #e5e7eb;
        box-shadow: 0 4px 6px rgba(0, 0, 0, 0.08);
        padding: 0.75rem 1.5rem;
        gap: 0;
      }}
      .navbar.menu-open .nav-links {{ display: flex; }}
      .nav-link {{ padding: 0.75rem 0; width: 100%; }}
      .nav-link::after {{ display: none; }}
      .hero {{ padding: 2rem 0.5rem 1.5rem; }}
      .hero h1 {{ font-size: 1.8rem; }}
      .hero-subtitle {{ font-size: 1rem; }}
      .prototypes-grid {{ grid-template-columns: 1fr; }}
    }}
  </style>
</head>
<body>
  <nav class="navbar" id="navbar">
    <div class="nav-container">
      <a href="/" class="nav-brand">{site_title}</a>
      <button class="nav-toggle" type="button" aria-label="Toggle navigation">
        <span class="hamburger-line"></span>
        <span class="hamburger-line"></span>
        <span class="hamburger-line"></span>
      </button>
      <ul class="nav-links">
        <li><a href="/" class="nav-link">Prototypes</a></li>
        <li><a href="{documentation_url}" target="_blank" rel="noopener noreferrer" class="nav-link">Documentation <span class="external-icon" aria-hidden="true">&#8599;</span></a></li>
        <li><a href="{about_url}" target="_blank" rel="noopener noreferrer" class="nav-link">About Me <span class="external-icon" aria-hidden="true">&#8599;</span></a></li>
      </ul>
    </div>
  </nav>

  <main class="main-content">
    <div class="hero">
      <h1>Welcome to <span class="brand-highlight">{site_title}</span></h1>
      <p class="hero-subtitle">A prototyping platform for exploring and sharing UX design concepts.</p>
    </div>

    <section class="prototypes-section">
      <p class="prototypes-count">{count_line}</p>
{listing}
    </section>
  </main>

  <script>
    // Mobile menu toggle
    document.querySelector('.nav-toggle').addEventListener('click', function() {{
      document.getElementById('navbar').classList.toggle('menu-open');
    }});
  </script>
</body>
</html>"""


PLAIN_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{site_title}</title>
  <style>
    *, *::before, *::after {{ box-sizing: border-box; margin: 0; padding: 0; }}
    body {{
      font-family: system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif;
      background: #f9fafb;
      color: #213547;
      min-height: 100vh;
      max-width: 960px;
      margin: 0 auto;
      padding: 2.5rem 1.5rem;
    }}
    header {{ margin-bottom: 2rem; }}
    header h1 {{ font-size: 2rem; color: #111827; }}
    .prototypes-count {{ color: #64748b; font-size: 0.9rem; margin-top: 0.5rem; }}
    .prototypes-grid {{
      display: grid;
      grid-template-columns: repeat(auto-fill, minmax(260px, 1fr));
      gap: 1rem;
    }}
    .prototype-card {{
      display: block;
      background: #ffffff;
      border: 1px solid #e2e8f0;
      border-radius: 10px;
      padding: 1.25rem;
      text-decoration: none;
      color: inherit;
      transition: border-color 0.2s ease;
    }}
    .prototype-card:hover {{ border-color: #4f46e5; }}
    .card-title {{ font-size: 1.05rem; font-weight: 600; color: #1e293b; margin-bottom: 0.35rem; }}
    .card-url {{ font-size: 0.8rem; color: #4f46e5; word-break: break-all; }}
    .empty {{
      text-align: center;
      color: #94a3b8;
      padding: 3rem 1rem;
      background: #ffffff;
      border-radius: 10px;
      border: 1px dashed #cbd5e1;
    }}
    footer {{ margin-top: 2.5rem; color: #94a3b8; font-size: 0.8rem; }}
  </style>
</head>
<body>
  <header>
    <h1>{site_title}</h1>
    <p class="prototypes-count">{count_line}</p>
  </header>

  <main>
{listing}
  </main>

  <footer>
    <p class="last-updated">Last updated: {timestamp}</p>
  </footer>
</body>
</html>"""
