"""Constants shared by the schema builder and the validator."""

# Categories whose wildcard entry receives the common interface properties
PATCHED_CATEGORIES = (
    "ethernets",
    "vlans",
    "bridges",
    "wifis",
    "bonds",
    "tunnels",
    "vrfs",
)

# Categories kept as closed placeholders with no properties
PLACEHOLDER_CATEGORIES = (
    "modems",
    "nm-devices",
)

WILDCARD_ENTRY = ".*$"

INSERTION_POINT_TEMPLATE = "/properties/network/properties/{category}/patternProperties/{entry}/properties"

# Message templates
PARSE_FAILURE_MESSAGE = "parser failed to parse the file"
UNEXPECTED_KEYWORD_TEMPLATE = "Unexpected keyword {path}/{detail}"
DUPLICATE_ITEM_TEMPLATE = "Duplicate item {path}/{detail}"
UNEXPECTED_VALUE_TEMPLATE = "Unexpected value {path}: {detail}"
