"""
Error taxonomy for the schema-to-graph pipeline.

Every error here is a contract violation between the schema, the value and
the visit plan. They are raised immediately and never retried.
"""

from __future__ import annotations


class SchemaGraphError(Exception):
    """Base class for all pipeline errors."""

    pass


class SchemaFormatError(SchemaGraphError):
    """Raised when a schema document cannot be parsed into definitions.

    This can happen when:
    - A definition uses an unknown shape tag
    - A required key (declaration, definitions, fields, ...) is missing
    - A member has the wrong JSON type
    """

    pass


class SchemaInconsistencyError(SchemaGraphError):
    """Raised when a declaration and its definition disagree.

    For example "Vec<u8>" mapped to a Struct definition, an Option whose
    definition is not a two-variant enum, or a term that was never expanded.
    """

    pass


class InvalidNumericWidthError(SchemaInconsistencyError):
    """Raised for integer or float declarations with an unsupported bit width."""

    pass


class TraversalIndexOutOfRangeError(SchemaGraphError):
    """Raised when the visit plan and the normalized schema have diverged."""

    pass


class MissingLiteralForLeafError(SchemaGraphError):
    """Raised when a leaf node is built without its textual rendering."""

    pass


class ValueMismatchError(SchemaGraphError):
    """Raised when a Python value cannot be mapped onto the schema node being visited."""

    pass
