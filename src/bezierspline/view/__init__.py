"""
The VIEW layer draws the model. Only `view.widgets` and `view.main_window` import Qt.
"""
