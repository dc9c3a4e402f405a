"""
Main application entry point.
"""
import logging
import os

from crowdin_bridge import create_app

app = create_app()


if __name__ == '__main__':
    # For development
    logging.basicConfig(level=logging.DEBUG)
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 8787)), debug=True)
