"""Global helpers available to every site template."""

from markupsafe import Markup

MAX_COLUMNS = 12


def spacer(sm: int, md: int, lg: int) -> Markup:
    """Render an empty w3-css column used to pad a responsive row."""
    if sm > MAX_COLUMNS or md > MAX_COLUMNS or lg > MAX_COLUMNS:
        return Markup("<div><p>w3 column cannot exceed l12</p></div>")
    return Markup(
        '<div class="w3-container w3-content w3-col s{} m{} l{}" aria-hidden="true"></div>'
    ).format(sm, md, lg)


TEMPLATE_GLOBALS = {
    "spacer": spacer,
}
