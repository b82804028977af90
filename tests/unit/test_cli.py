"""Test the credcodec command line."""

import json

from click.testing import CliRunner

from credcodec.cli.main import cli, parse_chunk

EXAMPLE_MAIN_SLOT = "0x183a6125c38840424c4a85fa12bab2ab606c4b6d0e7cc73c0c06ba5300eab500"


def test_parse_chunk():
    assert parse_chunk("77") == 77
    assert parse_chunk("0x4d") == 77
    assert parse_chunk(" 0X4D ") == 77


def test_storage_slot():
    runner = CliRunner()
    result = runner.invoke(cli, ["storage-slot", "example.main"])

    assert result.exit_code == 0
    assert result.output.strip() == EXAMPLE_MAIN_SLOT


def test_storage_slot_json():
    runner = CliRunner()
    result = runner.invoke(cli, ["storage-slot", "example.main", "--format", "json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"name": "example.main", "slot": EXAMPLE_MAIN_SLOT}


def test_schema_hash():
    runner = CliRunner()
    result = runner.invoke(cli, ["schema-hash", "https://example.org/ctx.jsonld", "KYCAgeCredential"])

    assert result.exit_code == 0
    digest = result.output.strip()
    assert len(digest) == 32
    assert all(c in "0123456789abcdef" for c in digest)


def test_decode_chunks():
    runner = CliRunner()

    result = runner.invoke(cli, ["decode-chunks", "77"])
    assert result.exit_code == 0
    assert result.output == "M\n"

    result = runner.invoke(cli, ["decode-chunks", "0x69686c6544", "0", "--byteorder", "little"])
    assert result.exit_code == 0
    assert result.output == "Delhi\n"


def test_decode_chunks_out_of_range():
    """Out-of-range chunks exit with an error message, not a traceback."""
    runner = CliRunner()
    result = runner.invoke(cli, ["decode-chunks", hex(2**248)])

    assert result.exit_code == 1
    assert "out of range" in result.output


def test_decode_chunks_bad_literal():
    runner = CliRunner()
    result = runner.invoke(cli, ["decode-chunks", "abc"])

    assert result.exit_code == 2


def test_pack_string():
    runner = CliRunner()

    result = runner.invoke(cli, ["pack-string", "M", "--num-chunks", "2"])
    assert result.exit_code == 0
    assert result.output == "77\n0\n"

    result = runner.invoke(cli, ["pack-string", "Delhi", "--byteorder", "little", "--format", "json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"text": "Delhi", "chunks": [str(0x69686C6544)]}


def test_pack_string_too_long():
    runner = CliRunner()
    result = runner.invoke(cli, ["pack-string", "x" * 40, "--num-chunks", "1"])

    assert result.exit_code == 1
    assert "only 1 allowed" in result.output


def test_config_file(tmp_path):
    """Config values apply unless a command-line option overrides them."""
    config_path = tmp_path / "codec.json"
    config_path.write_text(json.dumps({"byteorder": "little"}))
    runner = CliRunner()

    result = runner.invoke(cli, ["--config", str(config_path), "decode-chunks", "0x69686c6544"])
    assert result.exit_code == 0
    assert result.output == "Delhi\n"

    result = runner.invoke(
        cli, ["--config", str(config_path), "decode-chunks", "0x69686c6544", "--byteorder", "big"]
    )
    assert result.exit_code == 0
    assert result.output == "ihleD\n"


def test_config_file_unknown_key(tmp_path):
    config_path = tmp_path / "codec.json"
    config_path.write_text(json.dumps({"width": 31}))
    runner = CliRunner()

    result = runner.invoke(cli, ["--config", str(config_path), "storage-slot", "example.main"])
    assert result.exit_code == 1
    assert "width" in result.output


def test_config_file_bad_num_chunks(tmp_path):
    """A mistyped config value is reported, not raised as a traceback."""
    config_path = tmp_path / "codec.json"
    config_path.write_text(json.dumps({"num_chunks": "4"}))
    runner = CliRunner()

    result = runner.invoke(cli, ["--config", str(config_path), "pack-string", "M"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "num_chunks" in result.output


def test_pack_string_negative_num_chunks():
    runner = CliRunner()
    result = runner.invoke(cli, ["pack-string", "M", "--num-chunks", "-1"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "num_chunks" in result.output
