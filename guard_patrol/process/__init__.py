from .main import MainProcess
