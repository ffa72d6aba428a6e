from django.urls import include, path

urlpatterns = [
    path("", include("shelfsync.urls")),
]

handler400 = "shelfsync.views.bad_request"
handler404 = "shelfsync.views.page_not_found"
handler500 = "shelfsync.views.server_error"
