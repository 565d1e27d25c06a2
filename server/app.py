"""
5e Reference: N/A (client/server split).
Purpose: Flask server for distance measurement.
Dependencies: flask, server/routes/distance.py.
Ext Hooks: Add more routes.
Client/Server: Server for logic.
"""

from flask import Flask
from server.routes.distance import bp as distance_bp


def create_app():
    app = Flask(__name__)
    app.register_blueprint(distance_bp)
    return app


if __name__ == "__main__":
    create_app().run(debug=True)
