"""Parameter whitelists for every remote method, keyed by API and version.

Each table maps the remote method name to the tuple of parameter names that
method accepts. Anything a caller passes that is not listed is dropped before
the request goes out.
"""

MAILCHIMP_1_1 = {
    'campaignContent': ('cid', 'for_archive'),
    'campaignCreate': ('type', 'options', 'content', 'segment_opts', 'type_opts'),
    'campaignDelete': ('cid',),
    'campaignEcommAddOrder': ('order',),
    'campaignFolders': (),
    'campaignPause': ('cid',),
    'campaignReplicate': ('cid',),
    'campaignResume': ('cid',),
    'campaignSchedule': ('cid', 'schedule_time', 'schedule_time_b'),
    'campaignSegmentTest': ('list_id', 'options'),
    'campaignSendNow': ('cid',),
    'campaignSendTest': ('cid', 'test_emails', 'send_type'),
    'campaignTemplates': (),
    'campaignUnschedule': ('cid',),
    'campaignUpdate': ('cid', 'name', 'value'),
    'campaigns': ('filter_id', 'filter_folder', 'filter_fromname', 'filter_fromemail', 'filter_title', 'filter_subject', 'filter_sendtimestart', 'filter_sendtimeend', 'filter_exact', 'start', 'limit'),
    'campaignAbuseReports': ('cid', 'start', 'limit'),
    'campaignClickStats': ('cid',),
    'campaignHardBounces': ('cid', 'start', 'limit'),
    'campaignSoftBounces': ('cid', 'start', 'limit'),
    'campaignStats': ('cid',),
    'campaignUnsubscribes': ('cid', 'start', 'limit'),
    'campaignClickDetailAIM': ('cid', 'url', 'start', 'limit'),
    'campaignEmailStatsAIM': ('cid', 'email_address'),
    'campaignEmailStatsAIMAll': ('cid', 'start', 'limit'),
    'campaignNotOpenedAIM': ('cid', 'start', 'limit'),
    'campaignOpenedAIM': ('cid', 'start', 'limit'),
    'createFolder': ('name',),
    'generateText': ('type', 'content'),
    'getAffiliateInfo': (),
    'inlineCss': ('html', 'strip_css'),
    'ping': (),
    'listBatchSubscribe': ('id', 'batch', 'double_optin', 'update_existing', 'replace_interests'),
    'listBatchUnsubscribe': ('id', 'emails', 'delete_member', 'send_goodbye', 'send_notify'),
    'listInterestGroupAdd': ('id', 'group_name', 'grouping_id', 'optional'),
    'listInterestGroupDel': ('id', 'group_name', 'grouping_id', 'optional'),
    'listInterestGroupings': ('id',),
    'listInterestGroups': ('id',),
    'listMemberInfo': ('id', 'email_address'),
    'listMembers': ('id', 'status', 'start', 'limit'),
    'listMergeVarAdd': ('id', 'tag', 'name', 'req'),
    'listMergeVarDel': ('id', 'tag'),
    'listMergeVars': ('id',),
    'listSubscribe': ('id', 'email_address', 'merge_vars', 'email_type', 'double_optin'),
    'listUnsubscribe': ('id', 'email_address', 'delete_member', 'send_goodbye', 'send_notify'),
    'listUpdateMember': ('id', 'email_address', 'merge_vars', 'email_type', 'replace_interests'),
    'lists': (),
    'apikeyAdd': ('username', 'password'),
    'apikeyExpire': ('username', 'password'),
    'apikeys': ('username', 'password', 'expired'),
}

MAILCHIMP_1_2 = {
    'campaignContent': ('cid', 'for_archive'),
    'campaignCreate': ('type', 'options', 'content', 'segment_opts', 'type_opts'),
    'campaignDelete': ('cid',),
    'campaignEcommAddOrder': ('order',),
    'campaignFolders': (),
    'campaignPause': ('cid',),
    'campaignReplicate': ('cid',),
    'campaignResume': ('cid',),
    'campaignSchedule': ('cid', 'schedule_time', 'schedule_time_b'),
    'campaignSegmentTest': ('list_id', 'options'),
    'campaignSendNow': ('cid',),
    'campaignSendTest': ('cid', 'test_emails', 'send_type'),
    'campaignShareReport': ('cid', 'opts'),
    'campaignTemplates': (),
    'campaignUnschedule': ('cid',),
    'campaignUpdate': ('cid', 'name', 'value'),
    'campaigns': ('filters', 'start', 'limit'),
    'campaignAbuseReports': ('cid', 'since', 'start', 'limit'),
    'campaignAdvice': ('cid',),
    'campaignAnalytics': ('cid',),
    'campaignBounceMessages': ('cid', 'start', 'limit', 'since'),
    'campaignClickStats': ('cid',),
    'campaignEcommOrders': ('cid', 'start', 'limit', 'since'),
    'campaignEepUrlStats': ('cid',),
    'campaignEmailDomainPerformance': ('cid',),
    'campaignGeoOpens': ('cid',),
    'campaignGeoOpensForCountry': ('cid', 'code'),
    'campaignHardBounces': ('cid', 'start', 'limit'),
    'campaignSoftBounces': ('cid', 'start', 'limit'),
    'campaignStats': ('cid',),
    'campaignUnsubscribes': ('cid', 'start', 'limit'),
    'campaignClickDetailAIM': ('cid', 'url', 'start', 'limit'),
    'campaignEmailStatsAIM': ('cid', 'email_address'),
    'campaignEmailStatsAIMAll': ('cid', 'start', 'limit'),
    'campaignNotOpenedAIM': ('cid', 'start', 'limit'),
    'campaignOpenedAIM': ('cid', 'start', 'limit'),
    'chimpChatter': (),
    'createFolder': ('name',),
    'ecommAddOrder': ('order',),
    'generateText': ('type', 'content'),
    'getAccountDetails': (),
    'getAffiliateInfo': (),
    'inlineCss': ('html', 'strip_css'),
    'listsForEmail': ('email_address',),
    'ping': (),
    'listAbuseReports': ('id', 'start', 'limit', 'since'),
    'listAddStaticSegment': ('id', 'name'),
    'listBatchSubscribe': ('id', 'batch', 'double_optin', 'update_existing', 'replace_interests'),
    'listBatchUnsubscribe': ('id', 'emails', 'delete_member', 'send_goodbye', 'send_notify'),
    'listDelStaticSegment': ('id', 'seg_id'),
    'listGrowthHistory': ('id',),
    'listInterestGroupAdd': ('id', 'group_name', 'grouping_id'),
    'listInterestGroupDel': ('id', 'group_name', 'grouping_id', 'optional'),
    'listInterestGroupUpdate': ('id', 'old_name', 'new_name', 'grouping_id', 'optional'),
    'listInterestGroupingAdd': ('id', 'name', 'type', 'groups'),
    'listInterestGroupingDel': ('grouping_id',),
    'listInterestGroupingUpdate': ('grouping_id', 'name', 'value'),
    'listInterestGroupings': ('id',),
    'listInterestGroups': ('id',),
    'listMemberInfo': ('id', 'email_address'),
    'listMembers': ('id', 'status', 'since', 'start', 'limit'),
    'listMergeVarAdd': ('id', 'tag', 'name', 'req'),
    'listMergeVarDel': ('id', 'tag'),
    'listMergeVarUpdate': ('id', 'tag', 'options'),
    'listMergeVars': ('id',),
    'listResetStaticSegment': ('id', 'seg_id'),
    'listStaticSegmentAddMembers': ('id', 'seg_id', 'batch'),
    'listStaticSegmentDelMembers': ('id', 'seg_id', 'batch'),
    'listStaticSegments': ('id',),
    'listSubscribe': ('id', 'email_address', 'merge_vars', 'email_type', 'double_optin', 'update_existing', 'replace_interests', 'send_welcome'),
    'listUnsubscribe': ('id', 'email_address', 'delete_member', 'send_goodbye', 'send_notify'),
    'listUpdateMember': ('id', 'email_address', 'merge_vars', 'email_type', 'replace_interests'),
    'listWebhookAdd': ('id', 'url', 'actions', 'sources'),
    'listWebhookDel': ('id', 'url'),
    'listWebhooks': ('id',),
    'lists': (),
    'apikeyAdd': ('username', 'password'),
    'apikeyExpire': ('username', 'password'),
    'apikeys': ('username', 'password', 'expired'),
}

MAILCHIMP_1_3 = {
    'campaignContent': ('cid', 'for_archive'),
    'campaignCreate': ('type', 'options', 'content', 'segment_opts', 'type_opts'),
    'campaignDelete': ('cid',),
    'campaignEcommOrderAdd': ('order',),
    'campaignPause': ('cid',),
    'campaignReplicate': ('cid',),
    'campaignResume': ('cid',),
    'campaignSchedule': ('cid', 'schedule_time', 'schedule_time_b'),
    'campaignSegmentTest': ('list_id', 'options'),
    'campaignSendNow': ('cid',),
    'campaignSendTest': ('cid', 'test_emails', 'send_type'),
    'campaignShareReport': ('cid', 'opts'),
    'campaignTemplateContent': ('cid',),
    'campaignUnschedule': ('cid',),
    'campaignUpdate': ('cid', 'name', 'value'),
    'campaigns': ('filters', 'start', 'limit'),
    'campaignAbuseReports': ('cid', 'since', 'start', 'limit'),
    'campaignAdvice': ('cid',),
    'campaignAnalytics': ('cid',),
    'campaignBounceMessage': ('cid', 'email'),
    'campaignBounceMessages': ('cid', 'start', 'limit', 'since'),
    'campaignClickStats': ('cid',),
    'campaignEcommOrders': ('cid', 'start', 'limit', 'since'),
    'campaignEepUrlStats': ('cid',),
    'campaignEmailDomainPerformance': ('cid',),
    'campaignGeoOpens': ('cid',),
    'campaignGeoOpensForCountry': ('cid', 'code'),
    'campaignHardBounces': ('cid', 'start', 'limit'),
    'campaignMembers': ('cid', 'status', 'start', 'limit'),
    'campaignSoftBounces': ('cid', 'start', 'limit'),
    'campaignStats': ('cid',),
    'campaignUnsubscribes': ('cid', 'start', 'limit'),
    'campaignClickDetailAIM': ('cid', 'url', 'start', 'limit'),
    'campaignEmailStatsAIM': ('cid', 'email_address'),
    'campaignEmailStatsAIMAll': ('cid', 'start', 'limit'),
    'campaignNotOpenedAIM': ('cid', 'start', 'limit'),
    'campaignOpenedAIM': ('cid', 'start', 'limit'),
    'ecommOrderAdd': ('order',),
    'ecommOrderDel': ('store_id', 'order_id'),
    'ecommOrders': ('start', 'limit', 'since'),
    'folderAdd': ('name', 'type'),
    'folderDel': ('fid', 'type'),
    'folderUpdate': ('fid', 'name', 'type'),
    'folders': ('type',),
    'campaignsForEmail': ('email_address',),
    'chimpChatter': (),
    'generateText': ('type', 'content'),
    'getAccountDetails': (),
    'inlineCss': ('html', 'strip_css'),
    'listsForEmail': ('email_address',),
    'ping': (),
    'listAbuseReports': ('id', 'start', 'limit', 'since'),
    'listActivity': ('id',),
    'listBatchSubscribe': ('id', 'batch', 'double_optin', 'update_existing', 'replace_interests'),
    'listBatchUnsubscribe': ('id', 'emails', 'delete_member', 'send_goodbye', 'send_notify'),
    'listClients': ('id',),
    'listGrowthHistory': ('id',),
    'listInterestGroupAdd': ('id', 'group_name', 'grouping_id', 'optional'),
    'listInterestGroupDel': ('id', 'group_name', 'grouping_id'),
    'listInterestGroupUpdate': ('id', 'old_name', 'new_name', 'grouping_id', 'optional'),
    'listInterestGroupingAdd': ('id', 'name', 'type', 'groups'),
    'listInterestGroupingDel': ('grouping_id',),
    'listInterestGroupingUpdate': ('grouping_id', 'name', 'value'),
    'listInterestGroupings': ('id',),
    'listLocations': ('id',),
    'listMemberActivity': ('id', 'email_address'),
    'listMemberInfo': ('id', 'email_address'),
    'listMembers': ('id', 'status', 'since', 'start', 'limit'),
    'listMergeVarAdd': ('id', 'tag', 'name', 'options'),
    'listMergeVarDel': ('id', 'tag'),
    'listMergeVarUpdate': ('id', 'tag', 'options'),
    'listMergeVars': ('id',),
    'listStaticSegmentAdd': ('id', 'name'),
    'listStaticSegmentDel': ('id', 'seg_id'),
    'listStaticSegmentMembersAdd': ('id', 'seg_id', 'batch'),
    'listStaticSegmentMembersDel': ('id', 'seg_id', 'batch'),
    'listStaticSegmentReset': ('id', 'seg_id'),
    'listStaticSegments': ('id',),
    'listSubscribe': ('id', 'email_address', 'merge_vars', 'email_type', 'double_optin', 'update_existing', 'replace_interests', 'send_welcome'),
    'listUnsubscribe': ('id', 'email_address', 'delete_member', 'send_goodbye', 'send_notify'),
    'listUpdateMember': ('id', 'email_address', 'merge_vars', 'email_type', 'replace_interests'),
    'listWebhookAdd': ('id', 'url', 'actions', 'sources'),
    'listWebhookDel': ('id', 'url'),
    'listWebhooks': ('id',),
    'lists': ('filters', 'start', 'limit'),
    'apikeyAdd': ('username', 'password'),
    'apikeyExpire': ('username', 'password'),
    'apikeys': ('username', 'password', 'expired'),
    'templateAdd': ('name', 'html'),
    'templateDel': ('id',),
    'templateInfo': ('tid', 'type'),
    'templateUndel': ('id',),
    'templateUpdate': ('id', 'values'),
    'templates': ('types', 'inactives', 'category'),
}

MAILCHIMP_2_0 = {
    'campaigns/content': ('cid', 'options'),
    'campaigns/create': ('type', 'options', 'content', 'segment_opts', 'type_opts'),
    'campaigns/delete': ('cid',),
    'campaigns/list': ('filters', 'start', 'limit', 'sort_field', 'sort_dir'),
    'campaigns/pause': ('cid',),
    'campaigns/replicate': ('cid',),
    'campaigns/resume': ('cid',),
    'campaigns/schedule-batch': ('cid', 'schedule_time', 'num_batches', 'stagger_mins'),
    'campaigns/schedule': ('cid', 'schedule_time', 'schedule_time_b'),
    'campaigns/segment-test': ('list_id', 'options'),
    'campaigns/send': ('cid',),
    'campaigns/send-test': ('cid', 'test_emails', 'send_type'),
    'campaigns/template-content': ('cid',),
    'campaigns/unschedule': ('cid',),
    'campaigns/update': ('cid', 'name', 'value'),
    'ecomm/order-add': ('order',),
    'ecomm/order-del': ('store_id', 'order_id'),
    'ecomm/orders': ('cid', 'start', 'limit', 'since'),
    'folders/add': ('name', 'type'),
    'folders/del': ('fid', 'type'),
    'folders/list': ('type',),
    'folders/update': ('fid', 'name', 'type'),
    'lists/abuse-reports': ('id', 'start', 'limit', 'since'),
    'lists/activity': ('id',),
    'lists/batch-subscribe': ('id', 'batch', 'double_optin', 'update_existing', 'replace_interests'),
    'lists/batch-unsubscribe': ('id', 'batch', 'delete_member', 'send_goodbye', 'send_notify'),
    'lists/clients': ('id',),
    'lists/growth-history': ('id',),
    'lists/interest-group-add': ('id', 'group_name', 'grouping_id'),
    'lists/interest-group-del': ('id', 'group_name', 'grouping_id'),
    'lists/interest-group-update': ('id', 'old_name', 'new_name', 'grouping_id'),
    'lists/interest-grouping-add': ('id', 'name', 'type', 'groups'),
    'lists/interest-grouping-del': ('grouping_id',),
    'lists/interest-grouping-update': ('grouping_id', 'name', 'value'),
    'lists/interest-groupings': ('id', 'counts'),
    'lists/list': ('filters', 'start', 'limit', 'sort_field', 'sort_dir'),
    'lists/locations': ('id',),
    'lists/member-activity': ('id', 'emails'),
    'lists/member-info': ('id', 'emails'),
    'lists/members': ('id', 'status', 'opts'),
    'lists/merge-var-add': ('id', 'tag', 'name', 'options'),
    'lists/merge-var-del': ('id', 'tag'),
    'lists/merge-var-reset': ('id', 'tag'),
    'lists/merge-var-set': ('id', 'tag', 'value'),
    'lists/merge-var-update': ('id', 'tag', 'options'),
    'lists/merge-vars': ('id',),
    'lists/segment-add': ('id', 'opts'),
    'lists/static-segment-add': ('id', 'name'),
    'lists/static-segment-del': ('id', 'seg_id'),
    'lists/static-segment-members-add': ('id', 'seg_id', 'batch'),
    'lists/static-segment-members-del': ('id', 'seg_id', 'batch'),
    'lists/static-segment-reset': ('id', 'seg_id'),
    'lists/static-segments': ('id',),
    'lists/segments': ('id', 'type'),
    'lists/subscribe': ('id', 'email', 'merge_vars', 'email_type', 'double_optin', 'update_existing', 'replace_interests', 'send_welcome'),
    'lists/unsubscribe': ('id', 'email', 'delete_member', 'send_goodbye', 'send_notify'),
    'lists/update-member': ('id', 'email', 'merge_vars', 'email_type', 'replace_interests'),
    'lists/webhook-add': ('id', 'url', 'actions', 'sources'),
    'lists/webhook-del': ('id', 'url'),
    'lists/webhooks': ('id',),
    'helper/account-details': ('id', 'exclude'),
    'helper/campaigns-for-email': ('email', 'options'),
    'helper/chimp-chatter': (),
    'helper/generate-text': ('type', 'content'),
    'helper/inline-css': ('html', 'strip_css'),
    'helper/lists-for-email': ('email',),
    'helper/ping': (),
    'helper/search-campaigns': ('query', 'offset', 'snip_start', 'snip_end'),
    'helper/search-members': ('query', 'id', 'offset'),
    'helper/verified-domains': (),
    'reports/abuse': ('cid', 'opts'),
    'reports/advice': ('cid',),
    'reports/bounce-message': ('cid', 'email'),
    'reports/bounce-messages': ('cid', 'opts'),
    'reports/click-detail': ('cid', 'tid', 'opts'),
    'reports/clicks': ('cid',),
    'reports/domain-performance': ('cid',),
    'reports/ecomm-orders': ('cid', 'opts'),
    'reports/eepurl': ('cid',),
    'reports/geo-opens': ('cid',),
    'reports/google-analytics': ('cid',),
    'reports/member-activity': ('cid', 'emails'),
    'reports/not-opened': ('cid', 'opts'),
    'reports/opened': ('cid', 'opts'),
    'reports/sent-to': ('cid', 'opts'),
    'reports/share': ('cid', 'opts'),
    'reports/summary': ('cid',),
    'reports/unsubscribes': ('cid', 'opts'),
    'templates/add': ('name', 'html', 'folder_id'),
    'templates/del': ('template_id',),
    'templates/info': ('template_id', 'type'),
    'templates/list': ('types', 'filters'),
    'templates/undel': ('template_id',),
    'templates/update': ('template_id', 'values'),
    'users/invite': ('email', 'role', 'msg'),
    'users/invite-resend': ('email',),
    'users/invite-revoke': ('email',),
    'users/invites': (),
    'users/login-revoke': ('username',),
    'users/logins': (),
    'vip/activity': (),
    'vip/add': ('id', 'emails'),
    'vip/del': ('id', 'emails'),
    'vip/members': (),
}

EXPORT_1_0 = {
    'list': ('id', 'status', 'segment', 'since'),
    'campaignSubscriberActivity': ('id', 'include_empty'),
}

STS_1_0 = {
    'DeleteVerifiedEmailAddress': ('email',),
    'ListVerifiedEmailAddresses': (),
    'VerifyEmailAddress': ('email',),
    'GetSendStats': ('tag_id', 'since'),
    'GetTags': (),
    'GetUrlStats': ('url_id', 'since'),
    'GetUrls': (),
    'SendEmail': ('message', 'track_opens', 'track_clicks', 'tags'),
    'GetSendQuota': (),
    'GetSendStatistics': (),
}

MANDRILL_1_0 = {
    'users/info': (),
    'users/ping': (),
    'users/ping2': (),
    'users/senders': (),
    'messages/send': ('message', 'async'),
    'messages/send-template': ('template_name', 'template_content', 'message', 'async'),
    'messages/search': ('query', 'date_from', 'date_to', 'tags', 'senders', 'limit'),
    'messages/parse': ('raw_message',),
    'messages/send-raw': ('raw_message', 'from_email', 'from_name', 'to', 'async'),
    'tags/list': (),
    'tags/delete': ('tag',),
    'tags/info': ('tag',),
    'tags/time-series': ('tag',),
    'tags/all-time-series': (),
    'rejects/add': ('email',),
    'rejects/list': ('email', 'include_expired'),
    'rejects/delete': ('email',),
    'whitelists/add': ('email',),
    'whitelists/list': ('email',),
    'whitelists/delete': ('email',),
    'senders/list': (),
    'senders/domains': (),
    'senders/info': ('address',),
    'senders/time-series': ('address',),
    'urls/list': (),
    'urls/search': ('q',),
    'urls/time-series': ('url',),
    'templates/add': ('name', 'from_email', 'from_name', 'subject', 'code', 'text', 'publish'),
    'templates/info': ('name',),
    'templates/update': ('name', 'from_email', 'from_name', 'subject', 'code', 'text', 'publish'),
    'templates/publish': ('name',),
    'templates/delete': ('name',),
    'templates/list': (),
    'templates/time-series': ('name',),
    'templates/render': ('template_name', 'template_content', 'merge_vars'),
    'webhooks/list': (),
    'webhooks/add': ('url', 'description', 'events'),
    'webhooks/info': ('id',),
    'webhooks/update': ('id', 'url', 'description', 'events'),
    'webhooks/delete': ('id',),
    'inbound/domains': ('domain',),
    'inbound/routes': ('domain',),
    'inbound/send-raw': ('raw_message', 'to', 'mail_from', 'helo', 'client_address'),
    'exports/info': ('id',),
    'exports/list': (),
    'exports/rejects': ('notify_email',),
    'exports/whitelist': ('notify_email',),
    'exports/activity': ('notify_email', 'date_from', 'date_to', 'tags', 'senders', 'states'),
}

PARTNER_1_3 = {
    'createList': ('apikey', 'detail'),
    'checkUsername': ('username',),
    'createUser': ('details', 'username'),
    'getNewUserDc': (),
}
