"""
Tests for the raw dump representation.
"""

import io

import pytest

from http_dump.utils.dump import PREFORMATTED_TAG, dump, var_dump


class TestVarDumpScalars:

    @pytest.mark.parametrize("value,expected", [
        (None, "NULL\n"),
        (True, "bool(true)\n"),
        (False, "bool(false)\n"),
        (42, "int(42)\n"),
        (1.5, "float(1.5)\n"),
        ("", 'string(0) ""\n'),
        ("ok", 'string(2) "ok"\n'),
    ])
    def test_scalar(self, value, expected):
        assert var_dump(value) == expected

    def test_string_length_is_bytes(self):
        # "é" is two bytes in UTF-8
        assert var_dump("é") == 'string(2) "é"\n'

    def test_bytes(self):
        assert var_dump(b"abc") == 'string(3) "abc"\n'

    def test_multiline_string_kept_raw(self):
        text = "HTTP/1.1 200 OK\r\nAllow: GET\r\n\r\n{}"
        assert var_dump(text) == f'string({len(text)}) "{text}"\n'


class TestVarDumpContainers:

    def test_mapping(self):
        assert var_dump({"name": "John", "surname": "Doe"}) == (
            "array(2) {\n"
            '  ["name"]=>\n'
            '  string(4) "John"\n'
            '  ["surname"]=>\n'
            '  string(3) "Doe"\n'
            "}\n"
        )

    def test_list_uses_integer_keys(self):
        assert var_dump([1, None]) == (
            "array(2) {\n"
            "  [0]=>\n"
            "  int(1)\n"
            "  [1]=>\n"
            "  NULL\n"
            "}\n"
        )

    def test_nested(self):
        assert var_dump({"a": {"b": True}}) == (
            "array(1) {\n"
            '  ["a"]=>\n'
            "  array(1) {\n"
            '    ["b"]=>\n'
            "    bool(true)\n"
            "  }\n"
            "}\n"
        )

    def test_empty(self):
        assert var_dump({}) == "array(0) {\n}\n"

    def test_object(self):
        class Thing:
            def __repr__(self):
                return "<thing>"

        assert var_dump(Thing()) == "object(Thing) (<thing>)\n"


class TestDump:

    def test_writes_to_stream(self):
        stream = io.StringIO()
        dump("ok", stream=stream)
        assert stream.getvalue() == 'string(2) "ok"\n'

    def test_preformatted_prefix(self):
        stream = io.StringIO()
        dump(False, stream=stream, preformatted=True)
        assert stream.getvalue() == PREFORMATTED_TAG + "bool(false)\n"

    def test_defaults_to_stdout(self, capsys):
        dump(None)
        assert capsys.readouterr().out == "NULL\n"

    def test_binary_stream_gets_original_bytes(self):
        buffer = io.BytesIO()
        stream = io.TextIOWrapper(buffer, encoding="ascii")

        dump("caf\udce9", stream=stream)

        assert buffer.getvalue() == b'string(4) "caf\xe9"\n'
