"""
============================================================
TARJETA CRC (Class / Responsibilities / Collaborators)
============================================================
Class: 001_users (Alembic Migration)

Responsibilities:
  - Crear la tabla `users` (contrato con PostgresUserRepository).
  - CHECK CONSTRAINT sobre valores válidos de role.
  - Índice UNIQUE sobre email.
  - Trigger que mantiene updated_at en cada UPDATE.

Collaborators:
  - PostgreSQL 13+ (gen_random_uuid nativo)
  - Alembic (framework de migraciones)

Policy:
  - Defaults alineados con el dominio: role 'client', avatar por defecto.
  - Downgrade elimina tabla, trigger y función.
============================================================
"""

from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Crea users + trigger de updated_at."""
    # 1. Tabla
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS users (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            name VARCHAR(255) NOT NULL,
            email VARCHAR(320) NOT NULL,
            phone VARCHAR(32) NOT NULL,
            birthdate DATE NOT NULL,
            avatar_url TEXT NOT NULL DEFAULT '/uploads/avatars/default.png',
            role VARCHAR(20) NOT NULL DEFAULT 'client',
            password TEXT NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_users_role CHECK (role IN ('admin', 'collaborator', 'client'))
        );
    """
    )

    # 2. Unicidad de email
    op.execute("CREATE UNIQUE INDEX IF NOT EXISTS uq_users_email ON users (email);")

    # 3. updated_at automático
    op.execute(
        """
        CREATE OR REPLACE FUNCTION users_set_updated_at() RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """
    )
    op.execute(
        """
        CREATE TRIGGER trg_users_updated_at
        BEFORE UPDATE ON users
        FOR EACH ROW EXECUTE FUNCTION users_set_updated_at();
    """
    )


def downgrade() -> None:
    """Elimina users y su trigger."""
    op.execute("DROP TRIGGER IF EXISTS trg_users_updated_at ON users;")
    op.execute("DROP FUNCTION IF EXISTS users_set_updated_at();")
    op.execute("DROP TABLE IF EXISTS users;")
