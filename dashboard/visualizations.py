from __future__ import annotations

import plotly.graph_objects as go

from dashboard.constants import MAX_MOOD_SCORE, MIN_MOOD_SCORE

PLOT_STYLE = {
    "text_main": "#2F2A3B",
    "text_soft": "#6B6478",
    "plot_grid": "rgba(107, 100, 120, 0.15)",
    "border": "rgba(107, 100, 120, 0.35)",
    "marker_line": "#FFFFFF",
}


def apply_common_plot_style(fig, title, show_xgrid=True, show_ygrid=True):
    fig.update_layout(
        title=title,
        title_font=dict(color=PLOT_STYLE["text_main"], size=16),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=PLOT_STYLE["text_main"]),
        margin=dict(l=40, r=20, t=40, b=30),
        xaxis=dict(
            showgrid=show_xgrid,
            gridcolor=PLOT_STYLE["plot_grid"],
            tickfont=dict(color=PLOT_STYLE["text_soft"]),
            zeroline=False,
            showline=True,
            linecolor=PLOT_STYLE["border"],
            mirror=True,
        ),
        yaxis=dict(
            showgrid=show_ygrid,
            gridcolor=PLOT_STYLE["plot_grid"],
            zeroline=False,
            tickfont=dict(color=PLOT_STYLE["text_soft"]),
            showline=True,
            linecolor=PLOT_STYLE["border"],
            mirror=True,
        ),
    )
    return fig


def mood_trend_chart(mood_df, title="Recent moods", color="#8B5CF6", height=240):
    fig = go.Figure(
        data=go.Scatter(
            x=list(mood_df["date_str"]),
            y=list(mood_df["mood_score"]),
            mode="lines+markers",
            line=dict(color=color, width=2),
            marker=dict(size=8, color=color, line=dict(width=1, color=PLOT_STYLE["marker_line"])),
        )
    )
    apply_common_plot_style(fig, title, show_xgrid=False, show_ygrid=True)
    fig.update_layout(height=height)
    fig.update_xaxes(categoryorder="array", categoryarray=list(mood_df["date_str"]), tickfont=dict(size=10))
    fig.update_yaxes(range=[MIN_MOOD_SCORE - 0.5, MAX_MOOD_SCORE + 0.5], dtick=1)
    return fig
