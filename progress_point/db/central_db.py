from pymongo import MongoClient
from progress_point.config.settings import DatabaseConfig, COLLECTIONS

# MongoDB connection configuration
MONGO_CLIENT_CONFIG = {
    'maxPoolSize': DatabaseConfig.MAX_POOL_SIZE,
    'connectTimeoutMS': DatabaseConfig.TIMEOUT_MS,
    'serverSelectionTimeoutMS': DatabaseConfig.TIMEOUT_MS,
    'socketTimeoutMS': 60000,
    'retryWrites': True,
    'retryReads': True,
    'connect': False,
}

def get_mongo_client():
    """Get a MongoDB client with connection pooling."""
    return MongoClient(DatabaseConfig.DB_URL, **MONGO_CLIENT_CONFIG)

# Single client for the process; pymongo connects on first operation
client = get_mongo_client()
db = client[DatabaseConfig.DB_NAME]

def get_collection(name):
    """Get collection from database."""
    return db[name]

batches_collection = get_collection(COLLECTIONS["batches_collection"])
time_restrictions_collection = get_collection(COLLECTIONS["time_restrictions_collection"])
