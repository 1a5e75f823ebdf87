"""Binding curve figures."""

from cspfit.plotting.binding import make_binding_figure, save_binding_figures

__all__ = ["make_binding_figure", "save_binding_figures"]
