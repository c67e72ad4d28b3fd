"""
WordPDF entrypoint

    flask --app app run
    python app.py
"""
import os

from wordpdf import create_app

# FLASK_CONFIG selects development, production or testing
app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", "5000")))
