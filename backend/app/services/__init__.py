# Services package init
"""
City Info Backend — Services Layer
====================================

Service Inventory:
    - CityInfoRepository: queries and unit of work over the request session
    - json_patch:         RFC 6902 patch documents applied to DTOs
    - MailService:        notification stub (local / cloud)
"""
