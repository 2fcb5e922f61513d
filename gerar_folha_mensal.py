import logging
import argparse
from datetime import date

from honorarios.database import SessionLocal, Base, engine
from honorarios.services.folha import executar_folha_mensal

# --- Importações de todos os modelos ---
from honorarios.models.usuario import Usuario  # noqa: F401
from honorarios.models.cliente import Cliente  # noqa: F401
from honorarios.models.processo import Processo  # noqa: F401
from honorarios.models.staff import Staff  # noqa: F401
from honorarios.models.evento_financeiro import EventoFinanceiro  # noqa: F401
from honorarios.models.titulo import TituloFinanceiro  # noqa: F401
from honorarios.models.credito import CreditoStaff  # noqa: F401
from honorarios.models.notificacao import Notificacao, EventoOutbox  # noqa: F401
# ------------------------------------------------------

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def gerar_folha():
    """
    Credita o pro-labore de todos os profissionais FIXO_MENSAL.
    Por padrão usa o mês corrente; --month e --year forçam outro período.
    """
    parser = argparse.ArgumentParser(description='Folha mensal (pro-labore / salários)')
    parser.add_argument('--month', type=int, help='Mês de referência (1-12)')
    parser.add_argument('--year', type=int, help='Ano de referência (ex: 2025)')
    args = parser.parse_args()

    if (args.month is None) != (args.year is None):
        parser.error("--month e --year devem ser informados juntos.")

    referencia = date.today()
    if args.month and args.year:
        try:
            referencia = date(args.year, args.month, 1)
            logging.info(f"MODO MANUAL: folha de {referencia.strftime('%m/%Y')}")
        except ValueError:
            logging.error("Data inválida fornecida nos parâmetros.")
            return 2

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        resultado = executar_folha_mensal(db, referencia)
    finally:
        db.close()

    for falha in resultado.falhas:
        logging.error(f"-> FALHA staff {falha['staff_id']}: {falha['erro']}")
    logging.info(
        f"Folha {resultado.mes_referencia}: {resultado.count} creditado(s), "
        f"{len(resultado.ignorados)} já creditado(s) no mês."
    )
    return 1 if resultado.falhas else 0


if __name__ == "__main__":
    raise SystemExit(gerar_folha())
