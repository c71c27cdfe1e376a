from flask import Blueprint, jsonify


bp = Blueprint("hello", __name__)


@bp.get("/hello")
def hello():
    return jsonify({"message": "Hello, world!"})
