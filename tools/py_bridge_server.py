import sys
import os
import argparse
import importlib


# Fail loudly and helpfully if required Python packages are missing.
def _require_modules(mods):
    missing = []
    for m in mods:
        try:
            importlib.import_module(m)
        except Exception:
            missing.append(m)
    if missing:
        print("\nERROR: Missing required Python package(s): {}".format(', '.join(missing)))
        print("Install them with:")
        print("  python -m pip install -e .")
        sys.exit(1)


_require_modules(['flask', 'numpy'])

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from flask import Flask, request, jsonify
from BCE.BBM.converter_bridge import handle

app = Flask(__name__)


@app.route('/py-bridge/convert', methods=['POST'])
def convert():
    """
    Body: {"trigger": "hex", "text": "DE AD", "state": <previous state or null>}
    Returns the next state dict (same shape handle_json() produces).
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({'error': 'expected a JSON object body'}), 400
    trigger = body.get('trigger')
    if not trigger:
        return jsonify({'error': 'missing field `trigger`'}), 400
    try:
        return jsonify(handle(body.get('state'), str(trigger), str(body.get('text', ''))))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400


@app.route('/py-bridge/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})


if __name__ == '__main__':
    ap = argparse.ArgumentParser(description="Byte converter HTTP bridge")
    ap.add_argument("--host", default="127.0.0.1", help="default 127.0.0.1")
    ap.add_argument("--port", type=int, default=5000, help="default 5000")
    args = ap.parse_args()

    print(f"Byte converter bridge on http://{args.host}:{args.port}/py-bridge/")
    app.run(host=args.host, port=args.port)
