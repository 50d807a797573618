"""Shape domain results into the JSON payloads exposed over HTTP.

Keys follow the camelCase Portuguese contract consumed by the web client;
monetary values are emitted as numbers rounded to cents.
"""

from decimal import Decimal
from typing import Any

from household_ledger.domain.models import (
    Category,
    CategoryDeletionCheck,
    CategoryOverview,
    CategoryTotalsReport,
    GrandTotal,
    Person,
    PersonDeletionSummary,
    PersonOverview,
    PersonTotalsReport,
    TransactionDetails,
    TransactionStats,
    TransactionValidation,
)
from household_ledger.utils.decimal_utils import quantize_money


def money(value: Decimal) -> float:
    return float(quantize_money(value))


def person_payload(
    person: Person,
    transaction_count: int = 0,
) -> dict[str, Any]:
    return {
        "id": person.id,
        "nome": person.name,
        "idade": person.age,
        "isMenorDeIdade": person.is_minor,
        "totalTransacoes": transaction_count,
    }


def person_overview_payload(overview: PersonOverview) -> dict[str, Any]:
    return person_payload(overview.person, overview.transaction_count)


def category_payload(
    category: Category,
    transaction_count: int = 0,
) -> dict[str, Any]:
    return {
        "id": category.id,
        "descricao": category.description,
        "finalidade": category.purpose.value,
        "finalidadeDescricao": category.purpose.label,
        "totalTransacoes": transaction_count,
    }


def category_overview_payload(overview: CategoryOverview) -> dict[str, Any]:
    return category_payload(overview.category, overview.transaction_count)


def transaction_payload(details: TransactionDetails) -> dict[str, Any]:
    transaction = details.transaction
    return {
        "id": transaction.id,
        "descricao": transaction.description,
        "valor": money(transaction.amount),
        "tipo": transaction.type.value,
        "tipoDescricao": transaction.type.label,
        "dataCriacao": transaction.created_at.isoformat(),
        "categoriaId": transaction.category_id,
        "categoriaNome": details.category_description,
        "pessoaId": transaction.person_id,
        "pessoaNome": details.person_name,
        "valorComSinal": money(transaction.signed_amount),
    }


def grand_total_payload(total: GrandTotal) -> dict[str, float]:
    return {
        "totalReceitas": money(total.total_income),
        "totalDespesas": money(total.total_expense),
        "saldoLiquido": money(total.balance),
    }


def person_totals_payload(report: PersonTotalsReport) -> dict[str, Any]:
    """Render the per-person totals report."""
    return {
        "totaisPorPessoa": [
            {
                "pessoaId": row.person_id,
                "nome": row.name,
                "totalReceitas": money(row.total_income),
                "totalDespesas": money(row.total_expense),
                "saldo": money(row.balance),
            }
            for row in report.rows
        ],
        "totalGeral": grand_total_payload(report.grand_total),
    }


def category_totals_payload(report: CategoryTotalsReport) -> dict[str, Any]:
    """Render the per-category totals report."""
    return {
        "totaisPorCategoria": [
            {
                "categoriaId": row.category_id,
                "descricao": row.description,
                "finalidade": row.purpose.value,
                "totalReceitas": money(row.total_income),
                "totalDespesas": money(row.total_expense),
                "saldo": money(row.balance),
            }
            for row in report.rows
        ],
        "totalGeral": grand_total_payload(report.grand_total),
    }


def stats_payload(stats: TransactionStats) -> dict[str, Any]:
    latest = None
    if stats.latest is not None:
        latest = {
            "id": stats.latest.id,
            "descricao": stats.latest.description,
            "dataCriacao": stats.latest.created_at.isoformat(),
        }
    return {
        "totalTransacoes": stats.total_transactions,
        "totalReceitas": money(stats.total_income),
        "totalDespesas": money(stats.total_expense),
        "saldoGeral": money(stats.balance),
        "ultimaTransacao": latest,
    }


def deletion_check_payload(check: CategoryDeletionCheck) -> dict[str, Any]:
    return {
        "podeRemover": check.allowed,
        "totalTransacoes": check.transaction_count,
        "mensagem": check.reason,
    }


def person_deletion_payload(summary: PersonDeletionSummary) -> dict[str, Any]:
    return {
        "message": summary.message,
        "transacoesRemovidas": summary.removed_transactions,
    }


def validation_payload(validation: TransactionValidation) -> dict[str, Any]:
    return {
        "valida": validation.is_valid,
        "problemas": validation.messages,
    }


__all__ = [
    "money",
    "person_payload",
    "person_overview_payload",
    "category_payload",
    "category_overview_payload",
    "transaction_payload",
    "grand_total_payload",
    "person_totals_payload",
    "category_totals_payload",
    "stats_payload",
    "deletion_check_payload",
    "person_deletion_payload",
    "validation_payload",
]
