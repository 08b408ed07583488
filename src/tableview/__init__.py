"""
tableview – in-memory tabular data view engine.

Import path convention::

    from tableview.application.view import PaginationStateController, ViewPipeline
    from tableview.application.filtering import FilterSpec, FilterState
    from tableview.application.sorting import SortDirective
    from tableview.config.settings import ViewSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
