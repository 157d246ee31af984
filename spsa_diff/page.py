"""
Fetch a tuning page and pull the two record blocks out of its HTML.

The blocks sit inside elements tagged with the ``spsa-input`` and
``spsa-output`` markers; the text between the end of the opening tag and
the next ``<`` is the block.
"""

from __future__ import annotations

import requests

from spsa_diff.errors import BadStatus, MalformedPage, NetworkError

INPUT_MARKER = "spsa-input"
OUTPUT_MARKER = "spsa-output"
HTML_CLOSING_TAG = "</html>"


def fetch_page(url: str) -> str:
    """Fetch the page at ``url`` and return its body as text.

    Args:
        url: Address of the tuning page.

    Returns:
        The decoded response body.

    Raises:
        NetworkError: If the request fails at the transport level.
        MalformedPage: If the body has no closing ``</html>`` tag.
        BadStatus: If the status code is not 200.
    """
    try:
        resp = requests.get(url)
    except requests.RequestException as e:
        raise NetworkError(f"Could not fetch {url}: {e}") from e

    text = resp.text
    if HTML_CLOSING_TAG not in text:
        raise MalformedPage("HTML closing tag not found in page", HTML_CLOSING_TAG)
    if resp.status_code != 200:
        raise BadStatus(resp.status_code)
    return text


def _split_block(text: str, marker: str) -> tuple[str, str]:
    """Return (block, rest) for the first element tagged with ``marker``."""
    _, found, rest = text.partition(marker)
    if not found:
        raise MalformedPage(f'Did not find "{marker}" in page', marker)
    _, found, rest = rest.partition(">")
    if not found:
        raise MalformedPage(f'Did not find end of tag after "{marker}"', ">")
    block, found, rest = rest.partition("<")
    if not found:
        raise MalformedPage(f'Did not find start of tag after "{marker}" data', "<")
    return block, rest


def extract_blocks(text: str) -> tuple[str, str]:
    """Extract the input and output blocks from page text.

    The output marker is searched for after the end of the input block.

    Returns:
        (input_block, output_block)

    Raises:
        MalformedPage: If a marker or tag delimiter is missing.
    """
    input_block, rest = _split_block(text, INPUT_MARKER)
    output_block, _ = _split_block(rest, OUTPUT_MARKER)
    return input_block, output_block
