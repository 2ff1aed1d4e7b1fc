"""JSON 对象数组的字段类型推断工具

输入为 URL 或文件，内容必须是 JSON 对象数组。
"""
import collections
import logging

import click
import jsontypes
from jsontypes import util
from jsontypes.render import render
from jsontypes.typeinfer import aggregate, collect_keys

Options = collections.namedtuple('Options', 'rs_struct_generate with_comments struct_name')


class JsonType(object):
    def __init__(self, input_source, options):
        self.input_source = input_source
        self.options = options

    def run(self):
        records = util.load_records(self.input_source)
        keys = collect_keys(records)
        logging.info('%d distinct fields', len(keys))

        field_types = aggregate(records, keys)
        for line in render(field_types, self.options):
            print(line)


@click.command()
@click.option('--rs-struct-generate', '-r', is_flag=True, help='Generate a Rust struct instead of the type listing.')
@click.option('--with-comments/--without-comments', '-w/-W', default=True, help='Include comments in the Rust struct.')
@click.option('--struct-name', '-n', default='MyStruct', help='Name of the generated Rust struct.')
@click.option('--debug', '-d', is_flag=True, help='Print debug logs to stderr.')
@click.version_option(jsontypes.__version__, '--version', '-v', prog_name='jsontype', message='%(prog)s %(version)s')
@click.argument('input_source')
def run(input_source, rs_struct_generate, with_comments, struct_name, debug):
    """Infer the type of every field across a JSON array of objects.

    INPUT_SOURCE is a URL or a file path.
    """
    log_format = '%(asctime)s - %(levelname)s - %(message)s'
    log_level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=log_level, format=log_format)

    options = Options(rs_struct_generate, with_comments, struct_name)
    JsonType(input_source, options).run()


if __name__ == "__main__":
    run()
