from django.contrib import admin
from .models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    """Admin interface for Account model"""
    list_display = ['user', 'verified', 'deactivated', 'created_at']
    list_filter = ['verified', 'deactivated']
    search_fields = ['user__username', 'user__email']
    readonly_fields = ['created_at', 'updated_at']
    list_per_page = 25

    fieldsets = (
        ('User', {
            'fields': ('user',)
        }),
        ('Status', {
            'fields': ('verified', 'deactivated')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
