from luxplan.reporting.summary import format_report, layout_info, summary_items, to_dict

__all__ = ["format_report", "layout_info", "summary_items", "to_dict"]
