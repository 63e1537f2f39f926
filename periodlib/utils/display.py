"""
pt-BR display helpers for availability messaging.
"""

from typing import Optional, Tuple, Union

from periodlib.conventions.types import EntityType, PeriodStatus
from periodlib.schedule.core import PeriodStatusResult

from .date import DateLike, to_date

ENTITY_LABELS = {
    EntityType.EVALUATION: "Avaliações 360°",
    EntityType.ASSESSMENT: "Teste DISC",
}


def format_date_br(value: DateLike) -> str:
    """Render a date as dd/mm/yyyy; unparseable strings are returned unchanged."""
    try:
        return to_date(value).strftime("%d/%m/%Y")
    except ValueError:
        if isinstance(value, str):
            return value
        raise


def entity_label(entity_type: Union[EntityType, str]) -> str:
    return ENTITY_LABELS[EntityType(entity_type)]


def availability_message(label: str, result: PeriodStatusResult) -> Optional[str]:
    """One-line availability text for a classification result."""
    if result.status == PeriodStatus.WITHIN and result.current_window is not None:
        window = result.current_window
        return (
            f"{label} disponíveis de {format_date_br(window.period_start)} "
            f"a {format_date_br(window.period_end)}."
        )
    if result.status == PeriodStatus.BEFORE and result.next_period_start:
        return f"{label} disponíveis a partir de {format_date_br(result.next_period_start)}."
    if result.status == PeriodStatus.AFTER and result.next_period_start:
        return f"Próximo período a partir de {format_date_br(result.next_period_start)}."
    return None


def unavailable_notice(
    label: str, result: PeriodStatusResult
) -> Optional[Tuple[str, str]]:
    """
    (title, description) shown when an action is blocked, None when available.
    """
    if result.status == PeriodStatus.WITHIN:
        return None
    if result.status == PeriodStatus.BEFORE and result.next_period_start:
        return (
            "Fora do período de execução",
            f"{label} estarão disponíveis a partir de "
            f"{format_date_br(result.next_period_start)}.",
        )
    if result.status == PeriodStatus.AFTER and result.next_period_start:
        return (
            "Período encerrado",
            f"O próximo período terá início em {format_date_br(result.next_period_start)}.",
        )
    return (
        "Indisponível no momento",
        f"{label} não estão disponíveis. O RH pode configurar o período em Configurações.",
    )
