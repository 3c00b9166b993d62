# Modules that import Kivy are not collected for doctests: importing them sets up Kivy's window and input providers.
collect_ignore = [
    "colorscheme.py",
    "editor.py",
    "widgets",
]
