"""
FormField model: the readable state of one input element.
"""

from pydantic import BaseModel


class FormField(BaseModel):
    """
    Snapshot of an input element as the rule pipeline sees it.

    Attributes:
        name: The input's name attribute, if any
        validator: Declared validator name (the validator attribute), 0 or 1
        value: Current value, empty string when absent
        checked: Checked state for checkboxes and radios
        input_type: The input's type attribute (defaults to "text")
    """

    name: str | None = None
    validator: str | None = None
    value: str = ""
    checked: bool = False
    input_type: str = "text"

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "email",
                "validator": "email",
                "value": "john@somedomain.com",
                "checked": False,
                "input_type": "email",
            }
        }
