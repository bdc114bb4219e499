from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scimfilter.identifiers import SchemaUri


schemas: dict[str, bool] = {}


def register_schema(schema: "SchemaUri", extension: bool = False):
    """
    Registers the schema URI, so attributes bounded to it can be located in the data.
    Attributes from extensions are kept in the data under the extension's URI.
    """
    schemas[schema] = extension
