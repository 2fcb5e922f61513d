"""
Garante que exista ao menos um administrador para o primeiro acesso.

Credenciais via ADMIN_EMAIL / ADMIN_PASSWORD; troque a senha padrão em produção.
"""
import logging
import os

from sqlalchemy.exc import SQLAlchemyError

from honorarios.auth import get_password_hash
from honorarios.database import SessionLocal
from honorarios.dominio import ROLES_ADMIN
from honorarios.models.usuario import Usuario

# Registra as demais tabelas no metadata antes da primeira consulta
from honorarios.models import cliente, processo, staff, evento_financeiro, titulo, credito, notificacao  # noqa: F401

logger = logging.getLogger(__name__)


def create_first_user():
    db = SessionLocal()
    try:
        existe = db.query(Usuario.id).filter(Usuario.role.in_(ROLES_ADMIN)).first()
        if existe:
            logger.info("Administrador já cadastrado; nada a fazer.")
            return

        email = os.environ.get("ADMIN_EMAIL", "admin@escritorio.com.br")
        db.add(Usuario(
            username="admin",
            email=email,
            nome="Administrador do Escritório",
            hashed_password=get_password_hash(os.environ.get("ADMIN_PASSWORD", "admin")),
            role=ROLES_ADMIN[0],
        ))
        db.commit()
        logger.info("Administrador inicial criado (%s).", email)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Erro ao criar administrador inicial: {e}")
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_first_user()
