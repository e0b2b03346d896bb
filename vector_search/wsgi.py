"""
WSGI entry point, also used by the Flask CLI:

    FLASK_APP=vector_search.wsgi flask db upgrade
    gunicorn vector_search.wsgi:app
"""

from .app import create_app


# Create app instance for Flask CLI
app = create_app()


if __name__ == "__main__":
    app.run(host = "0.0.0.0", port = 5000)
