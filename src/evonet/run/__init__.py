from evonet.run.config import Config

__all__ = ['Config']
