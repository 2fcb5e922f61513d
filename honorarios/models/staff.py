# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Staff (advogados, estagiários, administrativo, parceiros).
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from honorarios.database import Base
from honorarios.services.compensacao import montar_regra


class Staff(Base):
    __tablename__ = "staff"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(150), nullable=False)
    email = Column(String(120), unique=True, index=True, nullable=True)
    role = Column(String(30), nullable=False, default="lawyer")  # lawyer, intern, employee, provider, partner
    numero_oab = Column(String(20), nullable=True)
    usuario_id = Column(Integer, ForeignKey("usuarios.id"), nullable=True)  # login vinculado (notificações)

    # Dados bancários (comprovante de repasse)
    banco = Column(String(80), nullable=True)
    agencia = Column(String(20), nullable=True)
    conta = Column(String(30), nullable=True)
    chave_pix = Column(String(120), nullable=True)

    # Remuneração: os campos usados dependem do tipo (ver compensacao.montar_regra)
    tipo_remuneracao = Column(String(20), nullable=True)
    percentual_escritorio = Column(Numeric(5, 2), nullable=True)
    percentual_advogado = Column(Numeric(5, 2), nullable=True)
    valor_fixo_mensal = Column(Numeric(12, 2), nullable=True)
    valor_por_audiencia = Column(Numeric(12, 2), nullable=True)
    preco_redacao = Column(Numeric(12, 2), nullable=True)
    preco_diligencia = Column(Numeric(12, 2), nullable=True)
    preco_outros = Column(Numeric(12, 2), nullable=True)

    criado_em = Column(DateTime, default=datetime.utcnow)

    creditos = relationship("CreditoStaff", back_populates="staff", cascade="all, delete-orphan")
    usuario = relationship("Usuario")

    @property
    def regra_remuneracao(self):
        """Regra de remuneração tipada, ou None se o cadastro não define uma."""
        return montar_regra(
            self.tipo_remuneracao,
            percentual_advogado=self.percentual_advogado,
            percentual_escritorio=self.percentual_escritorio,
            valor_fixo_mensal=self.valor_fixo_mensal,
            valor_por_audiencia=self.valor_por_audiencia,
            preco_redacao=self.preco_redacao,
            preco_diligencia=self.preco_diligencia,
            preco_outros=self.preco_outros,
        )
