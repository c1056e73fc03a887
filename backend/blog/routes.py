# All routes are in this one file
from flask import (
    Blueprint, current_app, jsonify, redirect, render_template, request,
    send_from_directory, session, url_for,
)
from werkzeug.exceptions import RequestEntityTooLarge

from .errors import BlogError
from .submission import Submission, load_feed, submit_post

POST_STATUS_KEY = 'poststatus'

# Pages and media for browsers
web = Blueprint('web', __name__)
# JSON endpoints, CORS enabled in the app factory
api = Blueprint('api', __name__)


def set_post_status(error=None):
    """Leave the outcome of a submission for the next feed load."""
    if error is None:
        session[POST_STATUS_KEY] = {'ok': True}
    else:
        session[POST_STATUS_KEY] = {'ok': False, 'error': error}


def pop_post_status():
    """Read and clear the submission outcome; None when there is none."""
    return session.pop(POST_STATUS_KEY, None)


@web.route('/', methods=['GET'])
def index():
    return redirect(url_for('web.home'), code=308)


@web.route('/home', methods=['GET'])
def home():
    current_app.logger.debug('GET /home invoked')
    post_status = pop_post_status()
    posts, posts_error = load_feed()
    return render_template('index.html', post_status=post_status,
                           posts=posts, posts_error=posts_error)


@web.route('/post', methods=['POST'])
def make_post():
    current_app.logger.debug('POST /post invoked')
    try:
        submission = Submission.from_form(request.form, request.files)
        post_id = submit_post(submission)
    except RequestEntityTooLarge:
        current_app.logger.warning('Submission rejected: request body too large')
        set_post_status('Request body too large')
    except BlogError as e:
        current_app.logger.warning(f'Submission failed ({type(e).__name__}): {e}')
        set_post_status(str(e))
    else:
        current_app.logger.debug(f'Submission stored as post {post_id}')
        set_post_status()
    return redirect(url_for('web.home'), code=303)


@web.route('/assets/<path:path>', methods=['GET'])
def assets(path):
    return send_from_directory(current_app.config['ASSETS_FOLDER'], path)


@api.route('/health', methods=['GET'])
def api_health():
    current_app.logger.debug('GET /api/health invoked')
    return jsonify({'status': 'ok'}), 200


@api.route('/posts', methods=['GET'])
def api_posts():
    current_app.logger.debug('GET /api/posts invoked')
    posts, error = load_feed()
    if error is not None:
        return jsonify({'message': error}), 500
    return jsonify({'posts': [post.to_dict() for post in posts]}), 200
