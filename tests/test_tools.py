import sys
import os
import json
import subprocess

import pytest

ROOT = os.path.join(os.path.dirname(__file__), '..')
sys.path.insert(0, ROOT)
sys.path.insert(0, os.path.join(ROOT, 'tools'))

from BCE.BVM.byte_inspect import main as inspect_main


@pytest.fixture
def client():
    import py_bridge_server
    py_bridge_server.app.config['TESTING'] = True
    return py_bridge_server.app.test_client()


# ── Inspector CLI ───────────────────────────────────────────────────────────

def test_inspect_accepts(capsys):
    assert inspect_main(["DE AD BE EF", "--source", "hex"]) == 0
    out = capsys.readouterr().out
    assert "Decimal  : 222 173 190 239" in out
    assert "[#0..3] LE:4022250974 BE:3735928559" in out
    assert "uint8_t data[] = { 0xDE, 0xAD, 0xBE, 0xEF };" in out
    assert "VERDICT: ACCEPTED" in out


def test_inspect_sections_numbered_in_order(capsys):
    inspect_main(["1, 2, 3, 250"])
    out = capsys.readouterr().out
    headings = ["[1] Input", "[2] Encodings", "[3] CRC-8", "[4] Unsigned View",
                "[5] Signed View", "[6] Bit Layout", "[7] C Literal"]
    positions = [out.index(f"-- {h}") for h in headings]
    assert positions == sorted(positions)


def test_inspect_parses_input_once(capsys, monkeypatch):
    from BCE.BPM.byte_parser import PARSERS
    calls = []
    real_parse_hex = PARSERS["hexadecimal"]
    monkeypatch.setitem(PARSERS, "hexadecimal", lambda text: calls.append(text) or real_parse_hex(text))
    assert inspect_main(["0xFF 0x00", "--source", "hex"]) == 0
    assert len(calls) == 1
    assert "Hex      : FF 00" in capsys.readouterr().out


def test_inspect_rejects(capsys):
    assert inspect_main(["1 2 256"]) == 1
    out = capsys.readouterr().out
    assert "VERDICT: REJECTED" in out
    assert "'256'" in out


def test_inspect_rejects_empty(capsys):
    assert inspect_main(["  ", "--source", "bin"]) == 1


def test_inspect_json(capsys):
    assert inspect_main(["OK", "--source", "ascii", "--json"]) == 0
    d = json.loads(capsys.readouterr().out)
    assert d["bytes"] == [79, 75]
    assert d["error_source"] is None


# ── Self-validation suite ───────────────────────────────────────────────────

def test_validate_suite_passes():
    proc = subprocess.run(
        [sys.executable, "-m", "BCE.BVM.validate"],
        cwd=ROOT, capture_output=True, text=True,
    )
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert "ALL TESTS PASSED" in proc.stdout


# ── HTTP bridge ─────────────────────────────────────────────────────────────

def test_health(client):
    r = client.get('/py-bridge/health')
    assert r.status_code == 200
    assert r.get_json() == {'status': 'ok'}


def test_convert_round_trip(client):
    r = client.post('/py-bridge/convert', json={'trigger': 'dec', 'text': '0, 255, 16'})
    assert r.status_code == 200
    d = r.get_json()
    assert d['panels']['c_array'] == 'uint8_t data[] = { 0x00, 0xFF, 0x10 };'

    r2 = client.post('/py-bridge/convert', json={'trigger': 'bin', 'text': '2', 'state': d})
    d2 = r2.get_json()
    assert d2['bytes'] == [0, 255, 16]
    assert d2['error_source'] == 'binary'


def test_convert_bad_requests(client):
    assert client.post('/py-bridge/convert', data='nope').status_code == 400
    assert client.post('/py-bridge/convert', json={'text': '1'}).status_code == 400
    r = client.post('/py-bridge/convert', json={'trigger': 'octal', 'text': '1'})
    assert r.status_code == 400
    assert 'Unknown trigger' in r.get_json()['error']
    r = client.post('/py-bridge/convert', json={'trigger': 'hex', 'text': '1', 'state': {'bytes': [999]}})
    assert r.status_code == 400
    r = client.post('/py-bridge/convert', json={'trigger': 'hex', 'text': '1', 'state': {'bytes': ['a']}})
    assert r.status_code == 400
    assert 'state byte' in r.get_json()['error']
