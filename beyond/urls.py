# beyond/urls.py
from django.contrib import admin
from django.urls import path


urlpatterns = [
    # Podgląd surowych wartości magazynu
    path('admin/', admin.site.urls),
]
