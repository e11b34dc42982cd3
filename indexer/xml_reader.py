"""
Text extraction from XML documents
"""
import warnings

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

SKIPPED_NODES = (CData, Comment, Declaration, Doctype, ProcessingInstruction)

# html.parser handles plain XML documents without needing lxml
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)


def extract_text(markup):
    """Join every character-data node of the markup, each followed by a space"""
    soup = BeautifulSoup(markup, 'html.parser')
    content = []

    for node in soup.find_all(string=True):
        if isinstance(node, SKIPPED_NODES):
            continue
        if not node.strip():
            continue
        content.append(str(node))
        content.append(" ")

    return "".join(content)


def read_entire_xml_file(file_path):
    """Read a file and return its character data as one string"""
    with open(file_path, 'r', encoding='utf-8') as f:
        return extract_text(f.read())
