"""
HTML form document wrapper.

Gives the rule pipeline what it needs from a page: locate forms,
enumerate input fields, read their state, apply submitted data, and
insert or remove inline error blocks.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from bs4 import BeautifulSoup, Tag

from form_validators.core.models import FormField
from form_validators.observability.logger import get_logger


logger = get_logger(__name__)

# Blocks this package inserts carry ERROR_MARKER; host alerts are left alone
ERROR_MARKER = "data-form-validator"
ERROR_SELECTOR = f"div.alert[{ERROR_MARKER}]"
ERROR_LABEL = "Error: "

# Input types whose value is not user text
_NON_VALUE_TYPES = {"submit", "button", "reset", "image", "file"}
_TOGGLE_TYPES = {"checkbox", "radio"}


class FormDocument:
    """
    A parsed HTML document holding one or more forms.

    Also owns the plugin side table: one FormValidatorPlugin per form
    element, keyed by element identity.
    """

    def __init__(self, html: str, parser: str = "html.parser"):
        """
        Parse the document.

        Args:
            html: Page markup
            parser: BeautifulSoup tree builder name
        """
        self.soup = BeautifulSoup(html, parser)
        self._plugins: dict[int, tuple[Tag, Any]] = {}

    def find_form(self, selector: str = "form") -> Tag:
        """
        Find the first element matching a CSS selector.

        Raises:
            LookupError: If nothing matches
        """
        element = self.soup.select_one(selector)
        if element is None:
            raise LookupError(f"No element matches selector: {selector}")
        return element

    def input_fields(self, container: Tag | None = None) -> list[Tag]:
        """All input elements inside container, or in the whole document."""
        scope = container if container is not None else self.soup
        return scope.find_all("input")

    @staticmethod
    def to_field(element: Tag) -> FormField:
        """Read an input element into a FormField."""
        validator = element.get("validator")
        return FormField(
            name=element.get("name"),
            validator=validator if validator else None,
            value=element.get("value", ""),
            checked=element.has_attr("checked"),
            input_type=(element.get("type") or "text").lower(),
        )

    def fill(self, data: Mapping[str, Any], container: Tag | None = None) -> None:
        """
        Apply submitted form data to the inputs, matched by name.

        Text-like inputs take the first submitted value. Checkboxes and
        radios are checked when their name was submitted and, if they
        carry a value attribute, that value was among the submitted ones.
        Inputs whose name was not submitted are left untouched, except
        toggles, which are unchecked.

        Args:
            data: Submitted values per name: a string, a list of strings, or a
                  scalar (numbers are stringified, True checks a toggle)
            container: Scope to fill (whole document when None)
        """
        for element in self.input_fields(container):
            name = element.get("name")
            input_type = (element.get("type") or "text").lower()
            if not name or input_type in _NON_VALUE_TYPES:
                continue

            submitted = data.get(name)
            if submitted is None or submitted is False:
                values = []
            elif isinstance(submitted, str) or not isinstance(submitted, Iterable):
                values = [str(submitted)]
            else:
                values = [str(v) for v in submitted]

            if input_type in _TOGGLE_TYPES:
                own_value = element.get("value")
                if submitted is True or (values and (own_value is None or own_value in values)):
                    element["checked"] = ""
                elif element.has_attr("checked"):
                    del element["checked"]
            elif values:
                element["value"] = values[0]

    def insert_error(self, element: Tag, message: str) -> Tag:
        """
        Insert an error block right after an element.

        Args:
            element: The failing input
            message: Rule message (inserted as escaped text)

        Returns:
            The inserted block
        """
        block = self.soup.new_tag("div", attrs={"role": "alert", ERROR_MARKER: ""})
        block["class"] = ["alert", "alert-danger"]

        glyph = self.soup.new_tag("span", attrs={"aria-hidden": "true"})
        glyph["class"] = ["glyphicon", "glyphicon-exclamation-sign"]
        block.append(glyph)

        label = self.soup.new_tag("span")
        label["class"] = ["sr-only"]
        label.string = ERROR_LABEL
        block.append(label)

        block.append(message)
        element.insert_after(block)
        return block

    def remove_errors(self, container: Tag | None = None) -> int:
        """
        Remove error blocks this package inserted inside container (or the
        whole document).

        Returns:
            Number of blocks removed
        """
        scope = container if container is not None else self.soup
        blocks = scope.select(ERROR_SELECTOR)
        for block in blocks:
            block.decompose()
        return len(blocks)

    def attach(
        self,
        selector: str = "form",
        options: Any = None,
        scope: str = "form",
        aggregate: str = "all",
    ):
        """
        Attach a validator plugin to the form matching selector.

        A form gets at most one plugin; attaching again returns the
        existing one and ignores the new arguments.

        Returns:
            FormValidatorPlugin bound to the form
        """
        from .plugin import FormValidatorPlugin

        element = self.find_form(selector)
        existing = self._plugins.get(id(element))
        if existing is not None:
            logger.debug(f"Plugin already attached to '{selector}', reusing it")
            return existing[1]

        plugin = FormValidatorPlugin(self, element, options=options, scope=scope, aggregate=aggregate)
        self._plugins[id(element)] = (element, plugin)
        return plugin

    def render(self) -> str:
        """Serialize the (possibly annotated) document."""
        return str(self.soup)
