from jsontypes import util
from jsontypes.typeinfer import OPTIONAL_TYPES, ValueType, sort_types

STRUCT_DERIVE = '#[derive(Deserialize, Serialize, Debug)]'


def format_types(types):
    return ', '.join(t.name for t in sort_types(types))


def render_listing(field_types):
    """字段名左对齐，后接出现过的类型
    """
    keys = sorted(field_types)
    width = max((len(key) for key in keys), default=0)
    for key in keys:
        yield '%s : %s' % (key.ljust(width), format_types(field_types[key]))


def optional_note(types):
    if ValueType.Null in types and ValueType.Absent in types:
        return '// Can be absent or null'
    elif ValueType.Null in types:
        return '// Can be null'
    elif ValueType.Absent in types:
        return '// Can be absent'
    return ''


def rust_type_expression(types):
    core = sort_types(set(types) - OPTIONAL_TYPES)
    if not core:
        return ValueType.Null.rust_type

    type_expr = ' | '.join(t.rust_type for t in core)
    if OPTIONAL_TYPES.intersection(types):
        return 'Option<%s>' % type_expr
    return type_expr


def render_field(key, types, with_comments):
    name = util.normalize_identifier(key)
    core = set(types) - OPTIONAL_TYPES

    # 多种类型时无法给出单一类型，只输出注释
    if len(core) != 1 and with_comments:
        return '\t// %s ∈ {%s}' % (name, format_types(types))

    line = '\t%s: %s,' % (name, rust_type_expression(types))
    if with_comments:
        note = optional_note(types)
        if note:
            line = '%s %s' % (line, note)
    return line


def render_struct(field_types, options):
    yield STRUCT_DERIVE
    yield 'struct %s {' % options.struct_name
    for key in sorted(field_types):
        yield render_field(key, field_types[key], options.with_comments)
    yield '}'


def render(field_types, options):
    if options.rs_struct_generate:
        return render_struct(field_types, options)
    return render_listing(field_types)
