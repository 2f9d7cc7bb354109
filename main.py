# main.py
import logging

from flask import Flask, jsonify, request

import config
from db.client import QueryExecutor
from gateway import QueryGateway, UnknownOperation

LOG = logging.getLogger(__name__)


def create_app(gateway=None):
    app = Flask(__name__)
    app.config["GATEWAY"] = gateway

    def get_gateway():
        # built lazily so importing the app never needs a database driver
        if app.config["GATEWAY"] is None:
            app.config["GATEWAY"] = QueryGateway(QueryExecutor())
        return app.config["GATEWAY"]

    @app.route("/tools", methods=["GET"])
    def list_tools():
        return jsonify(get_gateway().describe())

    @app.route("/tools/<name>", methods=["POST"])
    def call_tool(name):
        body = request.get_json(force=True, silent=True)
        query = body.get("query") if isinstance(body, dict) else None
        if not isinstance(query, str):
            return jsonify({"error": "query required"}), 400
        try:
            result = get_gateway().invoke(name, query)
        except UnknownOperation:
            return jsonify({"error": "unknown tool"}), 404
        return jsonify({"result": result})

    return app


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    print("Registered routes:")
    for r in sorted([rule.rule for rule in app.url_map.iter_rules()]):
        print(" ", r)
    app.run(host=config.HOST, port=config.PORT)
