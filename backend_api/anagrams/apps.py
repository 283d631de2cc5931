from django.apps import AppConfig


class AnagramsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "anagrams"
    verbose_name = "Anagram Helper"
