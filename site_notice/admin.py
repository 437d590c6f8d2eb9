# site_notice/admin.py
from django.contrib import admin

from .forms import SiteNoticeSettingsForm
from .models import SiteNoticeSettings


@admin.register(SiteNoticeSettings)
class SiteNoticeSettingsAdmin(admin.ModelAdmin):
    form = SiteNoticeSettingsForm
    list_display = ('message_summary', 'start', 'end', 'background', 'closable', 'updated_at')
    readonly_fields = ('updated_at',)
    fieldsets = (
        ('Message', {'fields': ('message', 'message_format', 'link_url')}),
        ('Schedule', {'fields': ('start', 'end')}),
        ('Appearance', {'fields': ('background', 'closable')}),
        ('Advanced', {
            'classes': ('collapse',),
            'fields': ('storage_key_salt', 'updated_at'),
        }),
    )

    def message_summary(self, obj):
        return obj.message[:75] + '...' if len(obj.message) > 75 else obj.message
    message_summary.short_description = 'Message'

    def has_add_permission(self, request):
        # Single settings row
        return not SiteNoticeSettings.objects.exists() and super().has_add_permission(request)

    def has_delete_permission(self, request, obj=None):
        return False
