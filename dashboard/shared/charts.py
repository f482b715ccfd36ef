"""Plotly figures for the driver detail view."""

from __future__ import annotations

import plotly.graph_objects as go

from seasonboard.models.competitor import Competitor

from .constants import F1_RED, GRID_GRAY, PLOTLY_LAYOUT_DEFAULTS


def build_round_chart(competitor: Competitor, color: str = F1_RED) -> go.Figure:
    """Grid vs finishing position per round.

    Unclassified rounds are left as gaps rather than plotted at zero.
    """
    rounds = [r for r in competitor.rounds_in_order() if r.round is not None]
    x = [r.round for r in rounds]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x,
        y=[r.grid for r in rounds],
        mode="lines+markers",
        name="Grid",
        line=dict(color=GRID_GRAY, dash="dot"),
        connectgaps=False,
    ))
    fig.add_trace(go.Scatter(
        x=x,
        y=[r.position for r in rounds],
        mode="lines+markers",
        name="Finish",
        line=dict(color=color),
        connectgaps=False,
        customdata=[r.status or "" for r in rounds],
        hovertemplate="Round %{x}<br>P%{y}<br>%{customdata}<extra></extra>",
    ))
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        title=f"{competitor.full_name} — round by round",
        xaxis_title="Round",
        yaxis_title="Position",
        height=320,
    )
    # P1 at the top
    fig.update_yaxes(autorange="reversed")
    return fig
