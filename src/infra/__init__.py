"""Infra — настройки хранилища и логирование."""
