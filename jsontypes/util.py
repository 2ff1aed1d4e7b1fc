import json
import logging
import math
from urllib.parse import urlparse

import click
import jsonschema
import requests

RECORDS_SCHEMA = {
    'type': 'array',
    'items': {'type': 'object'},
}


class InputError(click.ClickException):
    """输入无法读取或者不是对象数组
    """


def reject_constant(name):
    raise ValueError('%s is not a JSON value' % name)


def parse_finite_float(text):
    value = float(text)
    if math.isinf(value):
        raise ValueError('number out of range: %s' % text)
    return value


# ! json 模块默认接受 NaN、Infinity，并把 1e400 解析成 inf
JSON_OPTIONS = {
    'parse_constant': reject_constant,
    'parse_float': parse_finite_float,
}


def is_url(source):
    parsed = urlparse(source)
    return bool(parsed.scheme and parsed.netloc)


def fetch_json(url):
    logging.debug('GET %s', url)
    try:
        response = requests.get(url)
        response.raise_for_status()
    except requests.RequestException as e:
        raise InputError('cannot fetch %s: %s' % (url, e)) from e

    try:
        return response.json(**JSON_OPTIONS)
    except (ValueError, RecursionError) as e:
        raise InputError('response from %s is not valid JSON: %s' % (url, e)) from e


def read_json(path):
    logging.debug('reading %s', path)
    try:
        with open(path, 'r', encoding='utf-8') as fp:
            return json.load(fp, **JSON_OPTIONS)
    except OSError as e:
        raise InputError('cannot open %s: %s' % (path, e.strerror or e)) from e
    except (ValueError, RecursionError) as e:
        raise InputError('%s is not valid JSON: %s' % (path, e)) from e


def load_records(source):
    """读取 URL 或文件，返回 JSON 对象列表
    """
    data = fetch_json(source) if is_url(source) else read_json(source)

    try:
        jsonschema.validate(data, RECORDS_SCHEMA)
    except jsonschema.ValidationError as e:
        # ! e.path 为空表示顶层不是数组，否则是第几个元素
        if e.path:
            where = 'element %s' % e.path[0]
        else:
            where = 'top-level value'
        raise InputError('the input should be an array of objects (%s: %s)' % (where, e.message)) from e

    logging.info('loaded %d records from %s', len(data), source)
    return data


def normalize_identifier(name):
    return name.replace('-', '_')
