from __future__ import annotations

from conftest import SAMPLE_PNG
from typer.testing import CliRunner

from pngchunk.png import container
from pngchunk.runner import app

runner = CliRunner()


def test_encode_decode(sample_file) -> None:
    result = runner.invoke(app, ['png', 'encode', str(sample_file), 'RuSt', 'hello there'])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ['png', 'decode', str(sample_file), 'RuSt'])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == 'hello there'


def test_encode_to_output(sample_file, tmp_path) -> None:
    output = tmp_path / 'encoded.png'
    result = runner.invoke(
        app, ['png', 'encode', str(sample_file), 'RuSt', 'hi', '--output', str(output)]
    )
    assert result.exit_code == 0, result.output
    assert sample_file.read_bytes() == SAMPLE_PNG
    assert len(container.from_path(output)) == 4


def test_encode_rejects_invalid_chunk_type(sample_file) -> None:
    result = runner.invoke(app, ['png', 'encode', str(sample_file), 'Rust', 'hi'])
    assert result.exit_code != 0
    result = runner.invoke(app, ['png', 'encode', str(sample_file), 'Ru1t', 'hi'])
    assert result.exit_code != 0
    assert sample_file.read_bytes() == SAMPLE_PNG


def test_decode_missing_chunk(sample_file) -> None:
    result = runner.invoke(app, ['png', 'decode', str(sample_file), 'RuSt'])
    assert result.exit_code == 1


def test_remove(sample_file) -> None:
    runner.invoke(app, ['png', 'encode', str(sample_file), 'RuSt', 'hi'])
    result = runner.invoke(app, ['png', 'remove', str(sample_file), 'RuSt'])
    assert result.exit_code == 0, result.output
    assert sample_file.read_bytes() == SAMPLE_PNG


def test_print(sample_file) -> None:
    result = runner.invoke(app, ['png', 'print', str(sample_file)])
    assert result.exit_code == 0, result.output
    assert '8 IHDR 13' in result.output
    assert '57 IEND 0 0xae426082' in result.output


def test_print_corrupted_file(sample_file) -> None:
    data = bytearray(SAMPLE_PNG)
    data[50] ^= 0x01
    sample_file.write_bytes(bytes(data))
    result = runner.invoke(app, ['png', 'print', str(sample_file)])
    assert result.exit_code == 1


def test_missing_file(tmp_path) -> None:
    missing = str(tmp_path / 'missing.png')
    for args in (
        ['png', 'encode', missing, 'RuSt', 'hi'],
        ['png', 'decode', missing, 'RuSt'],
        ['png', 'remove', missing, 'RuSt'],
        ['png', 'print', missing],
    ):
        result = runner.invoke(app, args)
        assert result.exit_code == 1, result.output
        assert not isinstance(result.exception, OSError)
