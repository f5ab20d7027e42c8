"""
Purpose: Flask server for grid path/range queries.
Dependencies: flask, hexgrid/server/routes/grid.py, hexgrid/config.py.
Ext Hooks: Add more blueprints.
"""

import logging

from flask import Flask

from hexgrid.config import LOG_LEVEL
from hexgrid.server.routes.grid import bp as grid_bp

app = Flask(__name__)
app.register_blueprint(grid_bp)


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=False)


if __name__ == "__main__":
    main()
