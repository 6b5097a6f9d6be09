"""WSGI entry point for the savings calculator application."""

import argparse
import os

from app import create_app

app = create_app()


def main() -> None:
    """Run the development server."""
    parser = argparse.ArgumentParser(description="Savings calculator API server")
    parser.add_argument("--host", default=os.environ.get("HOST", "0.0.0.0"))
    # PORT is set by hosting platforms such as Render or Heroku
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", 5000)))
    args = parser.parse_args()

    app.run(debug=app.config["DEBUG"], host=args.host, port=args.port)


if __name__ == "__main__":
    main()
