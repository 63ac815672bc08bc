"""GS1 prefix allocations.

Source: GS1 company prefix list. Rows are ``(width, start, end, country,
iso_code)``; bounds are inclusive over the first ``width`` digits. Two-digit
rows cover organisations that own a whole decade of three-digit prefixes.

Restricted circulation (020-029, 040-049, 200-299), coupons (050-059, 981-984,
990-999), reserved blocks (140-199) and ISSN/ISBN (977-979) are absent:
codes in those blocks carry no country signal.
"""

GS1_PREFIXES: list[tuple[int, int, int, str, str]] = [
    # GS1 US (UPC-A read as EAN-13 carries a leading 0)
    (3, 0, 19, "United States", "US"),
    (3, 30, 39, "United States", "US"),
    (3, 60, 139, "United States", "US"),
    # Europe
    (2, 30, 37, "France", "FR"),
    (3, 380, 380, "Bulgaria", "BG"),
    (3, 383, 383, "Slovenia", "SI"),
    (3, 385, 385, "Croatia", "HR"),
    (3, 387, 387, "Bosnia and Herzegovina", "BA"),
    (3, 389, 389, "Montenegro", "ME"),
    (3, 390, 390, "Kosovo", "XK"),
    (3, 400, 440, "Germany", "DE"),
    (3, 474, 474, "Estonia", "EE"),
    (3, 475, 475, "Latvia", "LV"),
    (3, 477, 477, "Lithuania", "LT"),
    (3, 481, 481, "Belarus", "BY"),
    (3, 482, 482, "Ukraine", "UA"),
    (3, 484, 484, "Moldova", "MD"),
    (2, 50, 50, "United Kingdom", "GB"),
    (3, 520, 521, "Greece", "GR"),
    (3, 529, 529, "Cyprus", "CY"),
    (3, 530, 530, "Albania", "AL"),
    (3, 531, 531, "North Macedonia", "MK"),
    (3, 535, 535, "Malta", "MT"),
    (3, 539, 539, "Ireland", "IE"),
    (2, 54, 54, "Belgium", "BE"),
    (3, 560, 560, "Portugal", "PT"),
    (3, 569, 569, "Iceland", "IS"),
    (2, 57, 57, "Denmark", "DK"),
    (3, 590, 590, "Poland", "PL"),
    (3, 594, 594, "Romania", "RO"),
    (3, 599, 599, "Hungary", "HU"),
    (2, 64, 64, "Finland", "FI"),
    (2, 70, 70, "Norway", "NO"),
    (2, 73, 73, "Sweden", "SE"),
    (2, 76, 76, "Switzerland", "CH"),
    (2, 80, 83, "Italy", "IT"),
    (2, 84, 84, "Spain", "ES"),
    (3, 858, 858, "Slovakia", "SK"),
    (3, 859, 859, "Czech Republic", "CZ"),
    (3, 860, 860, "Serbia", "RS"),
    (3, 868, 869, "Turkey", "TR"),
    (2, 87, 87, "Netherlands", "NL"),
    (2, 90, 91, "Austria", "AT"),
    # CIS and Central Asia
    (3, 460, 469, "Russia", "RU"),
    (3, 470, 470, "Kyrgyzstan", "KG"),
    (3, 476, 476, "Azerbaijan", "AZ"),
    (3, 478, 478, "Uzbekistan", "UZ"),
    (3, 483, 483, "Turkmenistan", "TM"),
    (3, 485, 485, "Armenia", "AM"),
    (3, 486, 486, "Georgia", "GE"),
    (3, 487, 487, "Kazakhstan", "KZ"),
    (3, 488, 488, "Tajikistan", "TJ"),
    (3, 865, 865, "Mongolia", "MN"),
    # Asia-Pacific
    (3, 450, 459, "Japan", "JP"),
    (3, 490, 499, "Japan", "JP"),
    (3, 471, 471, "Taiwan", "TW"),
    (3, 479, 479, "Sri Lanka", "LK"),
    (3, 480, 480, "Philippines", "PH"),
    (3, 489, 489, "Hong Kong", "HK"),
    (2, 69, 69, "China", "CN"),
    (3, 867, 867, "North Korea", "KP"),
    (3, 880, 881, "South Korea", "KR"),
    (3, 883, 883, "Myanmar", "MM"),
    (3, 884, 884, "Cambodia", "KH"),
    (3, 885, 885, "Thailand", "TH"),
    (3, 888, 888, "Singapore", "SG"),
    (3, 890, 890, "India", "IN"),
    (3, 893, 893, "Vietnam", "VN"),
    (3, 896, 896, "Pakistan", "PK"),
    (3, 899, 899, "Indonesia", "ID"),
    (2, 93, 93, "Australia", "AU"),
    (2, 94, 94, "New Zealand", "NZ"),
    (3, 955, 955, "Malaysia", "MY"),
    (3, 958, 958, "Macau", "MO"),
    # Middle East and Africa
    (3, 528, 528, "Lebanon", "LB"),
    (3, 600, 601, "South Africa", "ZA"),
    (3, 603, 603, "Ghana", "GH"),
    (3, 604, 604, "Senegal", "SN"),
    (3, 608, 608, "Bahrain", "BH"),
    (3, 609, 609, "Mauritius", "MU"),
    (3, 611, 611, "Morocco", "MA"),
    (3, 613, 613, "Algeria", "DZ"),
    (3, 615, 615, "Nigeria", "NG"),
    (3, 616, 616, "Kenya", "KE"),
    (3, 617, 617, "Cameroon", "CM"),
    (3, 618, 618, "Côte d'Ivoire", "CI"),
    (3, 619, 619, "Tunisia", "TN"),
    (3, 620, 620, "Tanzania", "TZ"),
    (3, 621, 621, "Syria", "SY"),
    (3, 622, 622, "Egypt", "EG"),
    (3, 623, 623, "Brunei", "BN"),
    (3, 624, 624, "Libya", "LY"),
    (3, 625, 625, "Jordan", "JO"),
    (3, 626, 626, "Iran", "IR"),
    (3, 627, 627, "Kuwait", "KW"),
    (3, 628, 628, "Saudi Arabia", "SA"),
    (3, 629, 629, "United Arab Emirates", "AE"),
    (3, 630, 630, "Qatar", "QA"),
    (3, 631, 631, "Namibia", "NA"),
    (3, 729, 729, "Israel", "IL"),
    # Americas
    (3, 740, 740, "Guatemala", "GT"),
    (3, 741, 741, "El Salvador", "SV"),
    (3, 742, 742, "Honduras", "HN"),
    (3, 743, 743, "Nicaragua", "NI"),
    (3, 744, 744, "Costa Rica", "CR"),
    (3, 745, 745, "Panama", "PA"),
    (3, 746, 746, "Dominican Republic", "DO"),
    (3, 750, 750, "Mexico", "MX"),
    (3, 754, 755, "Canada", "CA"),
    (3, 759, 759, "Venezuela", "VE"),
    (3, 770, 771, "Colombia", "CO"),
    (3, 773, 773, "Uruguay", "UY"),
    (3, 775, 775, "Peru", "PE"),
    (3, 777, 777, "Bolivia", "BO"),
    (3, 778, 779, "Argentina", "AR"),
    (3, 780, 780, "Chile", "CL"),
    (3, 784, 784, "Paraguay", "PY"),
    (3, 786, 786, "Ecuador", "EC"),
    (3, 789, 790, "Brazil", "BR"),
    (3, 850, 850, "Cuba", "CU"),
]
