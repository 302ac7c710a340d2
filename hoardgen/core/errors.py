"""Errors raised while generating a treasure hoard.

Every error carries a human-readable message suitable for a user notification.
"""

from typing import Optional


class HoardError(Exception):
    """Base class for treasure hoard generation failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidFormula(HoardError):
    """A roll formula does not match the supported grammar."""

    def __init__(self, formula: str, message: Optional[str] = None):
        self.formula = formula
        super().__init__(
            message
            or f'"{formula}" is not a valid formula for item quantity in the Treasure hoard generator.'
        )


class PackNotFound(HoardError):
    """The requested table pack does not exist."""

    def __init__(self, pack_id: str):
        self.pack_id = pack_id
        super().__init__(f'Table pack "{pack_id}" could not be found.')


class TableNotFound(HoardError):
    """The requested table does not exist in the pack."""

    def __init__(self, pack_id: str, table_name: str):
        self.pack_id = pack_id
        self.table_name = table_name
        super().__init__(f'Table "{table_name}" could not be found in pack "{pack_id}".')


class UnsupportedItemType(HoardError):
    """A hoard configuration key names an unknown item category."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'"{key}" is not supported in the Treasure hoard generator yet.')


class MalformedTableText(HoardError):
    """A drawn table entry lacks an annotation the generator relies on."""

    def __init__(self, table_name: str, text: str, expected: str):
        self.table_name = table_name
        self.text = text
        self.expected = expected
        super().__init__(
            f'Entry "{text}" drawn from table "{table_name}" is missing {expected}.'
        )


class ItemResolutionFailed(HoardError):
    """A table entry's item reference could not be resolved."""

    def __init__(self, uuid: str):
        self.uuid = uuid
        super().__init__(f'Item "{uuid}" could not be resolved.')
