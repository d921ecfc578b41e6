"""Клиентский слой доступа к API гайда: общий HTTP-клиент и фасады ресурсов."""

__version__ = "0.1.0"
