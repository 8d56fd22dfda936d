import re

# Same placeholder syntax as sqlalchemy.text(): ":name", but not "::" casts
_BIND_PARAM_RE = re.compile(r"(?<![:\w\\]):(\w+)(?!:)")


def quote_identifier(name):
    """
    Delimit an identifier with double quotes, keeping its case.
    """
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def qualify_table(schema_name, table_name):
    return f"{quote_identifier(schema_name)}.{quote_identifier(table_name)}"


def bind_param_names(sql):
    """
    Return the named placeholders of ``sql`` in order of first appearance.
    """
    seen = []
    for name in _BIND_PARAM_RE.findall(sql):
        if name not in seen:
            seen.append(name)
    return seen
