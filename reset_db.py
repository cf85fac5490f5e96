# reset_db.py
from mindpulse.models import database  # Make sure this imports your Base
from mindpulse.models.database import engine
from mindpulse.models import *  # registers all models

if __name__ == "__main__":
    print("⚠️ Dropping all existing tables...")
    database.Base.metadata.drop_all(bind=engine)

    print("✅ Recreating tables from models...")
    database.Base.metadata.create_all(bind=engine)

    print("✅ Database reset complete.")
