from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

from drishti import create_app

# ===========================
# Create Flask app
# ===========================

flask_app = create_app()

# Gunicorn requires a callable named 'app'
app = flask_app

# ===========================
# Local development server
# ===========================
if __name__ == "__main__":
    flask_app.run(debug=True)
