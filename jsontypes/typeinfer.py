import collections
import enum
import logging

INT64_MIN = -2 ** 63
UINT64_MAX = 2 ** 64 - 1


class ValueType(enum.Enum):
    Null = 1
    Bool = 2
    Integer = 3
    Float = 4
    String = 5
    Array = 6
    Object = 7
    # 只在记录中缺少该字段时出现
    Absent = 8

    @property
    def rust_type(self):
        return RUST_TYPES[self]

    def __repr__(self):
        return self.name


RUST_TYPES = {
    ValueType.Null: 'Option<serde_json::Value>',
    ValueType.Bool: 'bool',
    ValueType.Integer: 'i64',
    ValueType.Float: 'f64',
    ValueType.String: 'String',
    ValueType.Array: 'Vec<serde_json::Value>',
    ValueType.Object: 'serde_json::Value',
    ValueType.Absent: 'Option<serde_json::Value>',
}

OPTIONAL_TYPES = frozenset((ValueType.Null, ValueType.Absent))


def classify(value):
    # ! bool 是 int 的子类，必须先判断
    if value is None:
        return ValueType.Null
    elif isinstance(value, bool):
        return ValueType.Bool
    elif isinstance(value, int):
        if INT64_MIN <= value <= UINT64_MAX:
            return ValueType.Integer
        return ValueType.Float
    elif isinstance(value, float):
        return ValueType.Float
    elif isinstance(value, str):
        return ValueType.String
    elif isinstance(value, list):
        return ValueType.Array
    elif isinstance(value, dict):
        return ValueType.Object
    raise TypeError('not a JSON value: %r' % (value,))


def collect_keys(records):
    keys = set()
    for record in records:
        keys.update(record)
    return keys


def aggregate(records, keys=None):
    """统计每个字段出现过的类型

    返回 {字段名: {ValueType, ...}}，记录中缺少的字段记为 Absent。
    """
    if keys is None:
        keys = collect_keys(records)

    results = collections.defaultdict(set)
    for record in records:
        for key in keys.difference(record):
            results[key].add(ValueType.Absent)

        for key, value in record.items():
            results[key].add(classify(value))

    logging.debug('aggregated %d fields over %d records', len(results), len(records))
    return dict(results)


def sort_types(types):
    return sorted(types, key=lambda t: t.value)
