from sqlalchemy.orm import declarative_base

# Mapped classes share this registry; the running service keeps records in
# memory and never binds an engine.
Base = declarative_base()
