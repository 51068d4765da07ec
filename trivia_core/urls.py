# trivia_core/urls.py
from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def ping(request):
    return JsonResponse({"status": "ok", "app": "trivia", "version": "dev"})


urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/quizzes/", include("apps.trivia_quizzes.urls")),
    path("ping/", ping),
]
