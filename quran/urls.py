from django.urls import path
from . import views

app_name = 'quran'

urlpatterns = [
    path('', views.surah_list, name='surah_list'),
    path('surah/<int:surah_number>/', views.surah_detail, name='surah_detail'),

    # API Endpoints
    path('api/surahs/', views.api_surah_list, name='api_surah_list'),
    path('api/surah/<int:surah_number>/', views.api_surah_detail, name='api_surah_detail'),
]
