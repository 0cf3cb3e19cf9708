from luxplan.design.layout import LayoutPlanner, plan_layout

__all__ = ["LayoutPlanner", "plan_layout"]
