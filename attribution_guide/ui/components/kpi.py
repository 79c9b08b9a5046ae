from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from attribution_guide.content import StatFigure
from attribution_guide.ui.components.formatting import format_currency, format_number


@dataclass
class StatCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    currency: Optional[str] = None
    decimals: int = 1
    compact: bool = True
    description: Optional[str] = None

    @classmethod
    def from_figure(cls, figure: StatFigure) -> "StatCard":
        return cls(
            label=figure.label,
            value=figure.value,
            value_display=figure.value_display,
            currency=figure.currency,
            decimals=figure.decimals,
            description=figure.description,
        )


def format_card_value(card: StatCard) -> str:
    if card.value_display is not None:
        return card.value_display
    if card.currency:
        return format_currency(card.value, currency=card.currency, decimals=card.decimals, compact=card.compact)
    return format_number(card.value, decimals=card.decimals, compact=card.compact, long_suffix=True)


def render_stat_cards(cards: Sequence[StatCard], columns: int = 3) -> None:
    """
    Render stat cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col.container(border=True):
                st.metric(label=card.label, value=format_card_value(card))
                if card.description:
                    st.caption(card.description)
