# componentdirs/model/__init__.py
