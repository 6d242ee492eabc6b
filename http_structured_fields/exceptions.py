class StructuredFieldsException(Exception):
    "Base class for exceptions raised by http_structured_fields"


class ParseError(StructuredFieldsException, ValueError):
    "Class for exceptions raised when input does not match the Structured Field grammar"


class SerializeError(StructuredFieldsException, ValueError):
    "Class for exceptions raised when a value can't be serialised as a Structured Field"
