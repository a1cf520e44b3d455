# componentdirs/core/__init__.py
