from logging.config import fileConfig
from alembic import context
from sqlalchemy import engine_from_config, pool
from devsync.core.config import settings
from devsync.db.session import Base

# import models
from devsync.models.user import User
from devsync.models.tag import Tag
from devsync.models.workspace import Workspace
from devsync.models.project import Project
from devsync.models.question import Question
from devsync.models.answer import Answer
from devsync.models.note import Note
from devsync.models.comment import Comment

config = context.config
fileConfig(config.config_file_name)
target_metadata = Base.metadata

def get_url():
    return settings.DATABASE_URL

def run_migrations_offline():
    context.configure(url=get_url(), target_metadata=target_metadata, literal_binds=True, compare_type=True)
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    cfg = config.get_section(config.config_ini_section)
    cfg["sqlalchemy.url"] = get_url()
    connectable = engine_from_config(cfg, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
