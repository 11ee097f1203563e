# Services package init
"""
Shelter Admin Backend — Services Layer
========================================

What:  Business rules between the routes (HTTP) and the database.
How:   One stateless service per resource, exposed as a module-level
       singleton. Every method takes the request's AsyncSession first and
       returns response schemas, never ORM rows.

Service Inventory:
    - base.CrudService:         list/get/update/delete/stats plumbing
    - transitions:              per-entity status tables (StatusMachine)
    - PetService, AdoptionService, AdoptionRecordService, RescueService,
      ActivityService, VolunteerService, DonationService,
      NotificationService, UserService
    - AuthService:              login and registration
    - DashboardService:         cross-table read-only aggregates
"""
