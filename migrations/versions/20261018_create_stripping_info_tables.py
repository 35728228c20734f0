"""create build report stripping tables

Revision ID: 20261018_strip
Revises:
Create Date: 2026-10-18

"""

from alembic import op

# revision identifiers, used by Alembic.
revision = "20261018_strip"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # 1. Build reports (one row per report, carries the total size)
    op.execute(
        """
        CREATE TABLE build_reports (
            report_id VARCHAR(64) PRIMARY KEY,
            total_size INTEGER NOT NULL DEFAULT 0,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT now()
        );
        """
    )

    # 2. Flattened attribution records
    op.execute(
        """
        CREATE TABLE stripping_dependencies (
            id SERIAL PRIMARY KEY,
            report_id VARCHAR(64) NOT NULL
                REFERENCES build_reports (report_id) ON DELETE CASCADE,
            position INTEGER NOT NULL,
            entity TEXT NOT NULL,
            icon TEXT NOT NULL,
            size INTEGER NOT NULL DEFAULT 0,
            CONSTRAINT uq_stripping_dependencies_report_entity UNIQUE (report_id, entity)
        );
        """
    )

    # 3. Reasons of each record, in snapshot order
    op.execute(
        """
        CREATE TABLE stripping_dependency_reasons (
            id SERIAL PRIMARY KEY,
            dependency_id INTEGER NOT NULL
                REFERENCES stripping_dependencies (id) ON DELETE CASCADE,
            position INTEGER NOT NULL,
            reason TEXT NOT NULL
        );
        """
    )

    # 4. Module list with the legacy per-module size
    op.execute(
        """
        CREATE TABLE stripping_modules (
            id SERIAL PRIMARY KEY,
            report_id VARCHAR(64) NOT NULL
                REFERENCES build_reports (report_id) ON DELETE CASCADE,
            position INTEGER NOT NULL,
            name TEXT NOT NULL,
            legacy_size INTEGER
        );
        """
    )

    # 5. Indexes for per-report lookups
    op.execute(
        """
        CREATE INDEX ix_stripping_dependencies_report_id
        ON stripping_dependencies (report_id);
        """
    )
    op.execute(
        """
        CREATE INDEX ix_stripping_dependency_reasons_dependency_id
        ON stripping_dependency_reasons (dependency_id);
        """
    )
    op.execute(
        """
        CREATE INDEX ix_stripping_modules_report_id
        ON stripping_modules (report_id);
        """
    )


def downgrade():
    # Children first
    op.execute("DROP TABLE IF EXISTS stripping_modules;")
    op.execute("DROP TABLE IF EXISTS stripping_dependency_reasons;")
    op.execute("DROP TABLE IF EXISTS stripping_dependencies;")
    op.execute("DROP TABLE IF EXISTS build_reports;")
