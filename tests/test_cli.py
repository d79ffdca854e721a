import json

import wkb_builder as wb
from yapwkb.__main__ import main

POINT_HEX = '0101000000000000000000F03F0000000000000040'
EWKB_HEX = '0101000020E6100000000000000000244000000000000014C0'


def test_decode_summary(capsys):
    assert main(['decode', POINT_HEX]) == 0
    out = capsys.readouterr().out
    assert out.strip() == 'Point (1 2) srid=0'


def test_decode_json(capsys):
    assert main(['decode', '--ewkb', '--json', EWKB_HEX]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc == {'type': 'Point', 'srid': 4326, 'coordinates': [10.0, -5.0]}


def test_decode_needs_dialect(capsys):
    assert main(['decode', EWKB_HEX]) == 1
    err = capsys.readouterr().err
    assert 'W101' in err
    assert 'support_ewkb' in err


def test_decode_file_with_config(tmp_path, capsys):
    payload = tmp_path / 'poly.wkb'
    payload.write_bytes(wb.polygon([[(0, 0), (1, 0), (0, 1), (0, 0)]]) + b'\xff')
    config = tmp_path / 'opts.yaml'
    config.write_text('wkb:\n  ignore_extra_bytes: true\n', encoding='utf-8')

    assert main(['decode', '--file', str(payload)]) == 1
    assert 'W302' in capsys.readouterr().err

    assert main(['decode', '--file', str(payload), '--config', str(config)]) == 0
    assert capsys.readouterr().out.startswith('Polygon (1 ring(s), 4 exterior point(s))')


def test_decode_bad_hex(capsys):
    assert main(['decode', '01xx']) == 1
    assert 'W002' in capsys.readouterr().err


def test_decode_without_input(capsys):
    assert main(['decode']) == 1
    assert 'required' in capsys.readouterr().err


def test_inspect(capsys):
    assert main(['inspect', EWKB_HEX]) == 0
    out = capsys.readouterr().out
    assert 'little endian' in out
    assert '0x20000001' in out
    assert 'srid:       4326' in out


def test_inspect_truncated(capsys):
    assert main(['inspect', '0101']) == 1
    assert 'W001' in capsys.readouterr().err
