import logging

from flask import Flask, request, jsonify

from aggregator import Aggregator
from config import Config
from playstore_service import PlayStoreSource, configure_logging

logger = logging.getLogger("PlayStoreFacade")

USAGE = "GET /?appIds=com.example.app1,com.example.app2"


def parse_app_ids(raw):
    if not raw:
        return []
    return [app_id.strip() for app_id in raw.split(",") if app_id.strip()]


def create_app(config=None, aggregator=None):
    config = config or Config.from_env()
    if aggregator is None:
        configure_logging(config.log_dir)
        aggregator = Aggregator(config, PlayStoreSource(timeout=config.request_timeout))

    app = Flask(__name__)
    app.config["FACADE_CONFIG"] = config

    @app.after_request
    def allow_any_origin(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.route("/api/apps")
    def get_all_apps():
        try:
            summaries = aggregator.developer_app_summaries()
        except Exception as e:
            logger.error(f"Error fetching apps: {e}")
            return jsonify({"success": False, "error": str(e)}), 500

        return jsonify({"success": True, "data": [s.to_dict() for s in summaries]})

    @app.route("/")
    def get_apps_by_ids():
        app_ids = parse_app_ids(request.args.get("appIds"))

        if not app_ids:
            return jsonify({
                "error": "Missing required parameter: appIds",
                "usage": USAGE,
                "endpoints": {"getAllApps": "/api/apps"},
            }), 400

        try:
            installs = aggregator.fetch_apps_by_ids(app_ids)
        except Exception as e:
            logger.error(f"Error fetching apps by id: {e}")
            return jsonify({"error": str(e)}), 500

        return jsonify([info.to_dict() for info in installs])

    return app


if __name__ == "__main__":
    config = Config.from_env()
    create_app(config).run(host="0.0.0.0", port=config.port)
