from flask import Flask, request, jsonify
import os
import logging
import threading
import traceback
from flask_cors import CORS
from config import Config
from indexer.lexer import query_terms
from indexer.tf_index import load_index
from utils.cache_manager import CacheManager
from utils.result_processor import build_response, rank_documents

config = Config()
logger = logging.getLogger(__name__)

app = Flask(__name__)
# Enable CORS with specific settings
CORS(app, resources={r"/api/*": {"origins": "*", "allow_headers": ["Content-Type"]}})
app.config['INDEX_PATH'] = config.index_path
app.config['RESULT_LIMIT'] = config.result_limit
cache_manager = CacheManager(max_size=config.cache_max_size, ttl=config.cache_ttl)

# Loaded index, reloaded when the file on disk changes
_index_state = {'path': None, 'mtime': None, 'index': None}
_index_lock = threading.Lock()


def get_index():
    """Return the TF index, loading it again if the file was modified"""
    index_path = app.config['INDEX_PATH']

    with _index_lock:
        mtime = os.path.getmtime(index_path)
        if _index_state['path'] != index_path or _index_state['mtime'] != mtime:
            logger.info(f"Loading index from {index_path}")
            _index_state['index'] = load_index(index_path)
            _index_state['path'] = index_path
            _index_state['mtime'] = mtime
            cache_manager.clear()

        return _index_state['index']


def extract_query(req):
    """Pull the query text out of a JSON or plain-text request body"""
    if req.is_json:
        data = req.get_json(silent=True)
        if isinstance(data, str):
            return data
        if isinstance(data, dict):
            return str(data.get('query', data.get('q', '')))
    return req.get_data(as_text=True)


@app.route('/api/search', methods=['POST'])
def search():
    try:
        print("=== Received search request ===")
        query = extract_query(request).strip()

        if not query:
            return jsonify({'error': 'Please provide a search query'}), 400

        limit = request.args.get('limit', app.config['RESULT_LIMIT'], type=int)
        print(f"Searching for: {query!r}, limit: {limit}")

        try:
            tf_index = get_index()
        except (OSError, ValueError) as e:
            logger.error(f"Search index not available: {str(e)}")
            return jsonify({'error': f"Search index not available: {str(e)}"}), 503

        terms = query_terms(query)
        ranked = cache_manager.lookup(terms, limit)
        if ranked is None:
            ranked = rank_documents(tf_index, terms, limit)
            cache_manager.store(terms, limit, ranked)
        else:
            print("Returning cached results")

        print(f"Returning {len(ranked)} results")
        return jsonify(build_response(query, terms, ranked))

    except Exception as e:
        print(f"Error in search route: {str(e)}")
        traceback.print_exc()
        return jsonify({'error': str(e)}), 500


@app.route('/api/health', methods=['GET'])
def health_check():
    try:
        documents = len(get_index())
    except (OSError, ValueError):
        documents = None
    return jsonify({'status': 'ok', 'documents': documents})


if __name__ == '__main__':
    app.run(port=config.port, debug=True)
