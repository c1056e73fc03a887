"""
WSGI entry point for the blog.

Serve with any WSGI server (``gunicorn api.index:app``) or run this file
directly for a development server on port 3000.
"""
import logging
from blog import create_app

app = create_app()

if __name__ == '__main__':
    logging.getLogger(__name__).debug('Listening on 0.0.0.0:3000')
    app.run(host='0.0.0.0', port=3000)
