from lofi_records import create_app
import os

# This file exists solely for gunicorn to have a WSGI entry point
app = create_app(os.getenv('FLASK_ENV', 'development'))

if __name__ == '__main__':
    app.run(
        host=app.config['HOST'],
        port=app.config['PORT'],
        debug=app.debug
    )
