"""
LAWGAN Starter Template
=======================

Runs the LAWGAN API, public pages and admin dashboard.

Run with:
    python app.py

Create tables first when using the sql backend:
    flask --app app init-db

Visit:
    http://localhost:5000        - Homepage
    http://localhost:5000/admin  - Admin dashboard
"""

from flask import Flask

from lawgan import Lawgan
from config import Config

app = Flask(__name__)
app.config.from_object(Config)

# Registers every LAWGAN module on the app
lawgan = Lawgan(app)


if __name__ == '__main__':
    port = app.config['PORT']
    print("\n" + "=" * 60)
    print("LAWGAN")
    print("=" * 60)
    print(f"Homepage:        http://localhost:{port}")
    print(f"Admin Dashboard: http://localhost:{port}/admin")
    print(f"API:             http://localhost:{port}/api/articles")
    print(f"Storage backend: {app.config['DB_BACKEND']}")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=port, debug=app.config['DEBUG'])
