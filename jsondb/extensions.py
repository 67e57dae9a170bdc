# jsondb/extensions.py
from flask_cors import CORS

from .storage.collection_store import CollectionStore

cors = CORS()

# Bound to JSONDB_PATH by create_app() via init_app
store = CollectionStore()
