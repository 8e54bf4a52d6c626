"""Scaling of the root SVG element's width and height"""
import re

SVG_OPEN_TAG_RE = re.compile(r"<svg\b([^>]*)>")
# Standalone attributes only, so stroke-width and friends are untouched
WIDTH_ATTR_RE = re.compile(r'(?<![\w:-])width="([^"]+)"')
HEIGHT_ATTR_RE = re.compile(r'(?<![\w:-])height="([^"]+)"')
LEADING_NUMBER_RE = re.compile(r"^([0-9.]+)(.*)$", re.DOTALL)

DEFAULT_UNIT = "px"


def _scale_attribute(attr_re: re.Pattern, name: str, attributes: str, factor: float) -> str:
    def replace(match: re.Match) -> str:
        number_match = LEADING_NUMBER_RE.match(match.group(1))
        if not number_match:
            return match.group(0)
        try:
            value = float(number_match.group(1))
        except ValueError:
            return match.group(0)
        unit = number_match.group(2) or DEFAULT_UNIT
        return f'{name}="{value * factor:.2f}{unit}"'

    return attr_re.sub(replace, attributes, count=1)


def scale_svg(svg_content: str, factor: float) -> str:
    """
    Multiply width/height of the first ``<svg>`` opening tag by ``factor``.

    ``"120px"`` becomes ``"240.00px"`` for a factor of 2; a missing unit
    defaults to ``px``. Values without a leading number are left unchanged,
    as is everything after the first ``<svg>`` tag.
    """
    def rewrite_tag(match: re.Match) -> str:
        attributes = match.group(1)
        attributes = _scale_attribute(WIDTH_ATTR_RE, "width", attributes, factor)
        attributes = _scale_attribute(HEIGHT_ATTR_RE, "height", attributes, factor)
        return f"<svg{attributes}>"

    return SVG_OPEN_TAG_RE.sub(rewrite_tag, svg_content, count=1)
