from jsontypes.jsontype import Options
from jsontypes.render import render, render_listing, render_struct
from jsontypes.typeinfer import aggregate

WITH_COMMENTS = Options(True, True, 'MyStruct')
WITHOUT_COMMENTS = Options(True, False, 'MyStruct')


def struct_fields(records, options=WITH_COMMENTS):
    lines = list(render_struct(aggregate(records), options))
    assert lines[0] == '#[derive(Deserialize, Serialize, Debug)]'
    assert lines[1] == 'struct %s {' % options.struct_name
    assert lines[-1] == '}'
    return lines[2:-1]


def test_listing_alignment():
    lines = list(render_listing(aggregate([{'a': 1, 'longkey': 'x'}])))
    assert lines == [
        'a       : Integer',
        'longkey : String',
    ]


def test_listing_types_in_declaration_order():
    lines = list(render_listing(aggregate([{'a': 'x'}, {'a': 1}, {}, {'a': None}])))
    assert lines == ['a : Null, Integer, String, Absent']


def test_listing_contains_every_key():
    records = [{'b': 1}, {'a-b': 2, 'c': []}]
    lines = list(render_listing(aggregate(records)))
    assert [line.split(' : ')[0].strip() for line in lines] == ['a-b', 'b', 'c']


def test_struct_nullable_integer():
    assert struct_fields([{'a': 1}, {'a': None}]) == ['\ta: Option<i64>, // Can be null']


def test_struct_absent_and_null():
    fields = struct_fields([{'a': 1.5, 'b': True}, {'b': None}, {}])
    assert fields == [
        '\ta: Option<f64>, // Can be absent',
        '\tb: Option<bool>, // Can be absent or null',
    ]


def test_struct_plain_types():
    fields = struct_fields([{'s': 'x', 'l': [], 'o': {}}])
    assert fields == [
        '\tl: Vec<serde_json::Value>,',
        '\to: serde_json::Value,',
        '\ts: String,',
    ]


def test_struct_multi_type_is_comment_only():
    assert struct_fields([{'a': 1}, {'a': 'x'}]) == ['\t// a ∈ {Integer, String}']


def test_struct_null_only_is_comment_only():
    assert struct_fields([{'a': None}, {}]) == ['\t// a ∈ {Null, Absent}']


def test_struct_without_comments():
    records = [{'a': 1, 'x-y': None}, {'a': 'x', 'b': 1.0}]
    assert struct_fields(records, WITHOUT_COMMENTS) == [
        '\ta: i64 | String,',
        '\tb: Option<f64>,',
        '\tx_y: Option<serde_json::Value>,',
    ]


def test_struct_normalizes_names():
    assert struct_fields([{'user-id': 1}]) == ['\tuser_id: i64,']


def test_struct_last_field_after_skipped_key():
    fields = struct_fields([{'a': 1, 'z': 1}, {'a': 2, 'z': 'x'}])
    assert fields == ['\ta: i64,', '\t// z ∈ {Integer, String}']


def test_struct_name():
    options = Options(True, True, 'Record')
    assert struct_fields([{'a': 1}], options) == ['\ta: i64,']


def test_empty_input():
    assert list(render({}, Options(False, True, 'MyStruct'))) == []
    assert list(render({}, WITH_COMMENTS)) == [
        '#[derive(Deserialize, Serialize, Debug)]',
        'struct MyStruct {',
        '}',
    ]
