"""Unit tests for the document parser adapter."""

import pytest
from pathlib import Path

from tfconfig.parser.document import Body, parse_document, unquote, get_object_field
from tfconfig.core.errors import ParseError, ErrorKind


def _block(**fields):
    """Block dictionary as hcl2 emits it."""
    return {**fields, '__is_block__': True}


class TestBodyFromDict:
    """Tests for Body.from_dict."""

    def test_blocks_and_attributes(self):
        body = Body.from_dict({
            'terraform': [
                _block(required_version='1.0.0'),
                _block(required_version='2.0.0'),
            ],
            'locals_value': 'x',
        })

        assert [b.identifier for b in body.blocks] == ['terraform', 'terraform']
        assert [a.key for a in body.attributes] == ['locals_value']
        assert [a.key for a in body.blocks[1].body.attributes] == ['required_version']
        assert body.blocks[1].body.attributes[0].expr == '2.0.0'

    def test_object_attribute_is_not_block(self):
        body = Body.from_dict({'mycloud': {'source': 'mycorp/mycloud'}})

        assert body.blocks == []
        assert body.attributes[0].key == 'mycloud'
        assert body.attributes[0].expr == {'source': 'mycorp/mycloud'}

    def test_list_of_objects_is_attribute(self):
        body = Body.from_dict({'terraform': [{'required_version': '9.9'}]})

        assert body.blocks == []
        assert body.attributes[0].key == 'terraform'
        assert body.attributes[0].expr == [{'required_version': '9.9'}]

    def test_scalar_list_is_attribute(self):
        body = Body.from_dict({'zones': ['a', 'b'], 'empty': []})

        assert body.blocks == []
        assert [a.key for a in body.attributes] == ['zones', 'empty']

    def test_metadata_keys_dropped(self):
        body = Body.from_dict({'__start_line__': 1, '__end_line__': 3, 'name': 'x'})

        assert [a.key for a in body.attributes] == ['name']

    def test_named_lookups(self):
        body = Body.from_dict({
            'terraform': [_block()],
            'provider': [_block()],
            'required_version': '1',
        })

        assert len(list(body.blocks_named('terraform'))) == 1
        assert list(body.blocks_named('module')) == []
        assert [a.expr for a in body.attributes_named('required_version')] == ['1']


class TestUnquote:
    """Tests for unquote helper."""

    def test_strips_quotes(self):
        assert unquote('"~> 1.0"') == '~> 1.0'

    def test_plain_string(self):
        assert unquote('1.0.0') == '1.0.0'

    def test_non_string(self):
        assert unquote(1) == '1'

    def test_booleans_use_hcl_spelling(self):
        assert unquote(True) == 'true'
        assert unquote(False) == 'false'
        assert unquote(None) == 'null'

    def test_strips_interpolation_wrapper(self):
        assert unquote('${var.x}') == 'var.x'
        assert unquote('"${var.x}"') == 'var.x'

    def test_keeps_template_with_several_interpolations(self):
        assert unquote('"${a}-${b}"') == '${a}-${b}'

    def test_object_field_lookup(self):
        obj = {'"source"': '"mycorp/mycloud"', 'version': '1.0'}
        assert get_object_field(obj, 'source') == '"mycorp/mycloud"'
        assert get_object_field(obj, 'version') == '1.0'
        assert get_object_field(obj, 'alias') is None


class TestParseDocument:
    """Tests for parse_document."""

    def test_parses_terraform_block(self):
        body = parse_document(
            'terraform {\n'
            '  required_version = ">= 1.2"\n'
            '  required_providers {\n'
            '    mycloud = {\n'
            '      source = "mycorp/mycloud"\n'
            '    }\n'
            '  }\n'
            '}\n'
        )

        terraform = list(body.blocks_named('terraform'))
        assert len(terraform) == 1

        inner = terraform[0].body
        assert [unquote(a.expr) for a in inner.attributes_named('required_version')] == ['>= 1.2']

        providers = list(inner.blocks_named('required_providers'))
        assert len(providers) == 1
        mycloud = providers[0].body.attributes[0]
        assert mycloud.key == 'mycloud'
        assert isinstance(mycloud.expr, dict)
        assert unquote(get_object_field(mycloud.expr, 'source')) == 'mycorp/mycloud'

    def test_list_attribute_is_not_block(self):
        body = parse_document('terraform = [{ required_version = "9.9" }]\n')

        assert list(body.blocks_named('terraform')) == []
        assert [a.key for a in body.attributes] == ['terraform']

    def test_reference_expression_text(self):
        body = parse_document('terraform {\n  required_version = var.x\n}\n')

        terraform = next(body.blocks_named('terraform'))
        assert [unquote(a.expr) for a in terraform.body.attributes] == ['var.x']

    def test_empty_document(self):
        body = parse_document('')
        assert body.blocks == []
        assert body.attributes == []

    def test_syntax_error(self):
        with pytest.raises(ParseError) as exc_info:
            parse_document('asdsadsadsad', path=Path('bad.tf'))

        assert exc_info.value.kind == ErrorKind.PARSE
        assert exc_info.value.path == Path('bad.tf')
