"""Parameter names of grouping-type command payloads."""

NAME = 'name'
EXTERNAL_ID = 'externalId'
OFFICE_ID = 'officeId'
STAFF_ID = 'staffId'
CENTER_ID = 'centerId'
CLIENT_MEMBERS = 'clientMembers'
GROUP_MEMBERS = 'groupMembers'
ACTIVE = 'active'
ACTIVATION_DATE = 'activationDate'
LOCALE = 'locale'
DATE_FORMAT = 'dateFormat'

NAME_MAX_LENGTH = 100
EXTERNAL_ID_MAX_LENGTH = 100
