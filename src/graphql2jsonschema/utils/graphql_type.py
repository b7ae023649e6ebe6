QUERY_TYPE_NAME = "Query"
MUTATION_TYPE_NAME = "Mutation"


def is_introspection_type(type_name: str) -> bool:
    return type_name.startswith("__")


def is_root_type(type_name: str) -> bool:
    return type_name in {
        QUERY_TYPE_NAME,
        MUTATION_TYPE_NAME,
    }


def is_builtin_scalar_type(type_name: str) -> bool:
    # ID is a GraphQL built-in but has no primitive JSON Schema counterpart here
    return type_name in {
        "String",
        "Int",
        "Float",
        "Boolean",
    }
