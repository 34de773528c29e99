from bs4 import BeautifulSoup
import re


def _squash(text):
    return re.sub(r"\s+", " ", text).strip()


def _table_to_text(table):
    """One line per row, cells separated by ' | '.

    Layout rows with a single cell keep their own line breaks so nested
    content survives.
    """
    lines = []
    for row in table.find_all("tr"):
        cells = [cell.get_text("\n") for cell in row.find_all(["td", "th"])]
        cells = [cell for cell in cells if cell.strip()]
        if not cells:
            continue
        if len(cells) == 1:
            lines.append(cells[0])
        else:
            lines.append(" | ".join(_squash(cell) for cell in cells))
    return "\n" + "\n".join(lines) + "\n"


def html_to_text(html_content):
    """Plain text fallback for an HTML email, keeping tables and link targets."""
    soup = BeautifulSoup(html_content, "html.parser")

    for tag in soup(["head", "script", "style", "noscript"]):
        tag.decompose()

    for br in soup.find_all("br"):
        br.replace_with("\n")

    for link in soup.find_all("a", href=True):
        label = _squash(link.get_text())
        href = link["href"]
        link.replace_with(f"{label} [{href}]" if label and label != href else href)

    # innermost tables first
    for table in reversed(soup.find_all("table")):
        table.replace_with(_table_to_text(table))

    text = soup.get_text(separator="\n")

    lines = []
    for line in text.splitlines():
        line = _squash(line)
        if line or (lines and lines[-1]):
            lines.append(line)
    return "\n".join(lines).strip()
