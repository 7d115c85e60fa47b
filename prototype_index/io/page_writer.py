"""
Writes generated pages to disk.
"""

from pathlib import Path
from typing import Union


class PageWriter:
    """Writes a rendered page as the full contents of its output file."""

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize page writer.

        Args:
            encoding: Text encoding for the output file. Must be able to
                represent the icon glyphs.
        """
        self.encoding = encoding

    def ensure_parent(self, output_path: Union[str, Path]) -> Path:
        """
        Create the parent directory of an output file if missing.

        Args:
            output_path: Target file path.

        Returns:
            Path to the parent directory.
        """
        parent = Path(output_path).parent
        parent.mkdir(parents=True, exist_ok=True)
        return parent

    def save_html(self, output_path: Union[str, Path], html_content: str) -> Path:
        """
        Save a page, overwriting any existing file.

        Args:
            output_path: Target file path.
            html_content: HTML document to write.

        Returns:
            Path to the saved file.
        """
        output_path = Path(output_path)
        self.ensure_parent(output_path)
        # newline="" keeps the template's \n line endings on every platform
        with open(output_path, "w", encoding=self.encoding, newline="") as f:
            f.write(html_content)
        return output_path
