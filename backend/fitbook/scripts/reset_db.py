from fitbook.core.db import Base, engine
import fitbook.models  # noqa: F401

print("⚙️ Dropping and recreating all tables...")
Base.metadata.drop_all(bind=engine)
Base.metadata.create_all(bind=engine)
print("✅ Database schema refreshed successfully.")
