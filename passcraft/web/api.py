from flask import Flask, jsonify, request

from passcraft.charsets import CharacterClass
from passcraft.config import DEFAULTS, length_bounds
from passcraft.generator import generate
from passcraft.strength import estimate_strength

app = Flask(__name__)
app.config["LENGTH_BOUNDS"] = length_bounds(DEFAULTS)

_OPTION_FIELDS = {
    'upper': CharacterClass.UPPER,
    'lower': CharacterClass.LOWER,
    'digits': CharacterClass.DIGIT,
    'symbols': CharacterClass.SYMBOL,
}

@app.route('/')
def home():
    return jsonify({
        "message": "passcraft API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({'error': 'invalid_body', 'message': 'Request body must be a JSON object.'}), 400
    length = data.get('length', DEFAULTS['length'])
    lo, hi = app.config["LENGTH_BOUNDS"]
    if isinstance(length, bool) or not isinstance(length, int) or not lo <= length <= hi:
        return jsonify({
            'error': 'invalid_length',
            'message': f"Length must be an integer between {lo} and {hi}.",
        }), 400

    flags = {field: data.get(field, True) for field in _OPTION_FIELDS}
    bad = [field for field, value in flags.items() if not isinstance(value, bool)]
    if bad:
        return jsonify({
            'error': 'invalid_option',
            'message': f"Options must be true or false: {', '.join(bad)}.",
        }), 400

    options = [cls for field, cls in _OPTION_FIELDS.items() if flags[field]]
    result = generate(length, options)
    if not result.ok:
        return jsonify({'error': result.error.value, 'message': result.message}), 422

    strength = estimate_strength(result.password, len(options))
    return jsonify({
        'password': result.password,
        'secure': result.secure,
        'strength': {'label': strength['label'], 'percent': strength['percent']},
    })

@app.route('/strength', methods=['POST'])
def strength_route():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({'error': 'invalid_body', 'message': 'Request body must be a JSON object.'}), 400
    password = data.get('password', '')
    if not isinstance(password, str):
        return jsonify({'error': 'invalid_password', 'message': 'password must be a string'}), 400
    result = estimate_strength(password)
    return jsonify({'label': result['label'], 'percent': result['percent'], 'score': result['score']})

if __name__ == "__main__":
    app.run(debug=True)
