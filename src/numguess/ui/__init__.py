from .view_model import GameScreenModel, GameScreenModelBuilder

__all__ = ["GameScreenModel", "GameScreenModelBuilder"]
