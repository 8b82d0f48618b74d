"""URL configuration of the listsync application."""

from rest_framework.routers import DefaultRouter

from listsync.views import MailingListViewSet

router = DefaultRouter()
router.register("mailing-lists", MailingListViewSet, basename="mailing-lists")

urlpatterns = router.urls
