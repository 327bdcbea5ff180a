"""create initial tables

Revision ID: 0001aa000001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001aa000001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    # Registro público de clientes
    op.create_table(
        "empresa_cliente",
        sa.Column("id", sa.Integer(), nullable=False, primary_key=True),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.Column("schema_name", sa.String(length=100), nullable=False),
        sa.Column("email_admin", sa.String(length=100), nullable=False),
        sa.Column("ativo", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.UniqueConstraint("schema_name", name="uq_empresa_cliente_schema_name"),
        sa.UniqueConstraint("email_admin", name="uq_empresa_cliente_email_admin"),
    )

    op.create_table(
        "empresa",
        sa.Column("id", sa.Integer(), nullable=False, primary_key=True),
        sa.Column("codigo", sa.String(length=20), nullable=True),
        sa.Column("nome", sa.String(length=200), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("codigo", name="uq_empresa_codigo"),
    )
    op.create_index(op.f("ix_empresa_codigo"), "empresa", ["codigo"], unique=False)

    op.create_table(
        "usuario",
        sa.Column("id", sa.Integer(), nullable=False, primary_key=True),
        sa.Column("nome", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("senha", sa.String(length=100), nullable=False),
        sa.Column("cargo", sa.String(length=100), nullable=True),
        sa.Column("empresa_id", sa.Integer(), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_premium", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("ultimo_login", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["empresa_id"], ["empresa.id"]),
        sa.UniqueConstraint("email", name="uq_usuario_email"),
    )
    op.create_index(op.f("ix_usuario_email"), "usuario", ["email"], unique=False)
    op.create_index(op.f("ix_usuario_empresa_id"), "usuario", ["empresa_id"], unique=False)

    op.create_table(
        "configuracao_api",
        sa.Column("id", sa.Integer(), nullable=False, primary_key=True),
        sa.Column("empresa_id", sa.Integer(), nullable=False),
        sa.Column("chave_funcionario", sa.String(length=100), nullable=True),
        sa.Column("codigo_funcionario", sa.String(length=100), nullable=True),
        sa.Column("codigo_empresa_funcionario", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("flag_ativo", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("flag_inativo", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("flag_pendente", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("flag_ferias", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("flag_afastado", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("chave_absenteismo", sa.String(length=100), nullable=True),
        sa.Column("codigo_absenteismo", sa.String(length=100), nullable=True),
        sa.Column("codigo_empresa_absenteismo", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("codigo_empresa_principal", sa.String(length=100), nullable=False, server_default=""),
        *_timestamps(),
        sa.ForeignKeyConstraint(["empresa_id"], ["empresa.id"]),
        sa.UniqueConstraint("empresa_id", name="uq_configuracao_api_empresa"),
    )
    op.create_index(op.f("ix_configuracao_api_empresa_id"), "configuracao_api", ["empresa_id"], unique=False)

    op.create_table(
        "funcionario",
        sa.Column("id", sa.Integer(), nullable=False, primary_key=True),
        sa.Column("codigo", sa.String(length=20), nullable=False),
        sa.Column("nome", sa.String(length=120), nullable=False),
        sa.Column("empresa_id", sa.Integer(), nullable=False),
        sa.Column("codigoempresa", sa.String(length=20), nullable=True),
        sa.Column("nomeempresa", sa.String(length=200), nullable=True),
        sa.Column("codigounidade", sa.String(length=20), nullable=True),
        sa.Column("nomeunidade", sa.String(length=130), nullable=True),
        sa.Column("codigosetor", sa.String(length=12), nullable=True),
        sa.Column("nomesetor", sa.String(length=130), nullable=True),
        sa.Column("codigocargo", sa.String(length=10), nullable=True),
        sa.Column("nomecargo", sa.String(length=130), nullable=True),
        sa.Column("cbocargo", sa.String(length=10), nullable=True),
        sa.Column("ccusto", sa.String(length=50), nullable=True),
        sa.Column("nomecentrocusto", sa.String(length=130), nullable=True),
        sa.Column("matriculafuncionario", sa.String(length=30), nullable=True),
        sa.Column("cpf", sa.String(length=19), nullable=True),
        sa.Column("rg", sa.String(length=19), nullable=True),
        sa.Column("ufrg", sa.String(length=10), nullable=True),
        sa.Column("orgaoemissorrg", sa.String(length=20), nullable=True),
        sa.Column("situacao", sa.String(length=12), nullable=True),
        sa.Column("sexo", sa.Integer(), nullable=True),
        sa.Column("pis", sa.String(length=20), nullable=True),
        sa.Column("ctps", sa.String(length=30), nullable=True),
        sa.Column("seriectps", sa.String(length=25), nullable=True),
        sa.Column("estadocivil", sa.Integer(), nullable=True),
        sa.Column("tipocontatacao", sa.Integer(), nullable=True),
        sa.Column("data_nascimento", sa.Date(), nullable=True),
        sa.Column("data_admissao", sa.Date(), nullable=True),
        sa.Column("data_demissao", sa.Date(), nullable=True),
        sa.Column("endereco", sa.String(length=110), nullable=True),
        sa.Column("numero_endereco", sa.String(length=20), nullable=True),
        sa.Column("bairro", sa.String(length=80), nullable=True),
        sa.Column("cidade", sa.String(length=50), nullable=True),
        sa.Column("uf", sa.String(length=20), nullable=True),
        sa.Column("cep", sa.String(length=10), nullable=True),
        sa.Column("telefoneresidencial", sa.String(length=20), nullable=True),
        sa.Column("telefonecelular", sa.String(length=20), nullable=True),
        sa.Column("email", sa.String(length=400), nullable=True),
        sa.Column("deficiente", sa.Integer(), nullable=True),
        sa.Column("deficiencia", sa.String(length=861), nullable=True),
        sa.Column("nm_mae_funcionario", sa.String(length=120), nullable=True),
        sa.Column("dataultalteracao", sa.Date(), nullable=True),
        sa.Column("matricularh", sa.String(length=30), nullable=True),
        sa.Column("cor", sa.Integer(), nullable=True),
        sa.Column("escolaridade", sa.Integer(), nullable=True),
        sa.Column("naturalidade", sa.String(length=50), nullable=True),
        sa.Column("ramal", sa.String(length=10), nullable=True),
        sa.Column("regimerevezamento", sa.Integer(), nullable=True),
        sa.Column("regimetrabalho", sa.String(length=500), nullable=True),
        sa.Column("telcomercial", sa.String(length=20), nullable=True),
        sa.Column("turnotrabalho", sa.Integer(), nullable=True),
        sa.Column("rhunidade", sa.String(length=80), nullable=True),
        sa.Column("rhsetor", sa.String(length=80), nullable=True),
        sa.Column("rhcargo", sa.String(length=80), nullable=True),
        sa.Column("rhcentrocustounidade", sa.String(length=80), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["empresa_id"], ["empresa.id"]),
        sa.UniqueConstraint("codigo", "empresa_id", name="uq_funcionario_codigo_empresa"),
    )
    op.create_index(op.f("ix_funcionario_empresa_id"), "funcionario", ["empresa_id"], unique=False)
    op.create_index(
        op.f("ix_funcionario_matriculafuncionario"), "funcionario", ["matriculafuncionario"], unique=False
    )

    op.create_table(
        "absenteismo",
        sa.Column("id", sa.Integer(), nullable=False, primary_key=True),
        sa.Column("empresa_id", sa.Integer(), nullable=False),
        sa.Column("funcionario_id", sa.Integer(), nullable=True),
        sa.Column("unidade", sa.String(length=130), nullable=True),
        sa.Column("setor", sa.String(length=130), nullable=True),
        sa.Column("matricula_func", sa.String(length=30), nullable=True),
        sa.Column("dt_nascimento", sa.Date(), nullable=True),
        sa.Column("sexo", sa.Integer(), nullable=True),
        sa.Column("tipo_atestado", sa.Integer(), nullable=True),
        sa.Column("dt_inicio_atestado", sa.Date(), nullable=True),
        sa.Column("dt_fim_atestado", sa.Date(), nullable=True),
        sa.Column("hora_inicio_atestado", sa.String(length=5), nullable=True),
        sa.Column("hora_fim_atestado", sa.String(length=5), nullable=True),
        sa.Column("dias_afastados", sa.Integer(), nullable=True),
        sa.Column("horas_afastado", sa.String(length=5), nullable=True),
        sa.Column("cid_principal", sa.String(length=10), nullable=True),
        sa.Column("descricao_cid", sa.String(length=264), nullable=True),
        sa.Column("grupo_patologico", sa.String(length=80), nullable=True),
        sa.Column("tipo_licenca", sa.String(length=100), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["empresa_id"], ["empresa.id"]),
        sa.ForeignKeyConstraint(["funcionario_id"], ["funcionario.id"]),
    )
    op.create_index(op.f("ix_absenteismo_empresa_id"), "absenteismo", ["empresa_id"], unique=False)
    op.create_index(op.f("ix_absenteismo_funcionario_id"), "absenteismo", ["funcionario_id"], unique=False)
    op.create_index(op.f("ix_absenteismo_matricula_func"), "absenteismo", ["matricula_func"], unique=False)
    op.create_index(op.f("ix_absenteismo_dt_inicio_atestado"), "absenteismo", ["dt_inicio_atestado"], unique=False)
    op.create_index(op.f("ix_absenteismo_dt_fim_atestado"), "absenteismo", ["dt_fim_atestado"], unique=False)
    op.create_index(op.f("ix_absenteismo_cid_principal"), "absenteismo", ["cid_principal"], unique=False)

    # Enums persistidos como VARCHAR (native_enum=False)
    op.create_table(
        "sync_log",
        sa.Column("id", sa.Integer(), nullable=False, primary_key=True),
        sa.Column("empresa_id", sa.Integer(), nullable=False),
        sa.Column("usuario_id", sa.Integer(), nullable=True),
        sa.Column(
            "tipo",
            sa.Enum("funcionarios", "absenteismo", name="sync_tipo", native_enum=False),
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.Enum("em_andamento", "concluido", "erro", name="sync_status", native_enum=False),
            nullable=False,
        ),
        sa.Column("detalhes", sa.Text(), nullable=True),
        sa.Column("mensagem_erro", sa.Text(), nullable=True),
        sa.Column("total_registros", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("registros_afetados", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("data_inicio", sa.DateTime(timezone=True), nullable=False),
        sa.Column("data_fim", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["empresa_id"], ["empresa.id"]),
        sa.ForeignKeyConstraint(["usuario_id"], ["usuario.id"]),
    )
    op.create_index(op.f("ix_sync_log_empresa_id"), "sync_log", ["empresa_id"], unique=False)
    op.create_index(op.f("ix_sync_log_status"), "sync_log", ["status"], unique=False)
    op.create_index(op.f("ix_sync_log_data_inicio"), "sync_log", ["data_inicio"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_sync_log_data_inicio"), table_name="sync_log")
    op.drop_index(op.f("ix_sync_log_status"), table_name="sync_log")
    op.drop_index(op.f("ix_sync_log_empresa_id"), table_name="sync_log")
    op.drop_table("sync_log")

    op.drop_index(op.f("ix_absenteismo_cid_principal"), table_name="absenteismo")
    op.drop_index(op.f("ix_absenteismo_dt_fim_atestado"), table_name="absenteismo")
    op.drop_index(op.f("ix_absenteismo_dt_inicio_atestado"), table_name="absenteismo")
    op.drop_index(op.f("ix_absenteismo_matricula_func"), table_name="absenteismo")
    op.drop_index(op.f("ix_absenteismo_funcionario_id"), table_name="absenteismo")
    op.drop_index(op.f("ix_absenteismo_empresa_id"), table_name="absenteismo")
    op.drop_table("absenteismo")

    op.drop_index(op.f("ix_funcionario_matriculafuncionario"), table_name="funcionario")
    op.drop_index(op.f("ix_funcionario_empresa_id"), table_name="funcionario")
    op.drop_table("funcionario")

    op.drop_index(op.f("ix_configuracao_api_empresa_id"), table_name="configuracao_api")
    op.drop_table("configuracao_api")

    op.drop_index(op.f("ix_usuario_empresa_id"), table_name="usuario")
    op.drop_index(op.f("ix_usuario_email"), table_name="usuario")
    op.drop_table("usuario")

    op.drop_index(op.f("ix_empresa_codigo"), table_name="empresa")
    op.drop_table("empresa")

    op.drop_table("empresa_cliente")
