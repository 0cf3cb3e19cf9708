from luxplan.plotting.layout_plot import plot_layout

__all__ = ["plot_layout"]
