"""Country and region tables generated by ``jurisdiction-compile``.

Do not edit by hand; regenerate from the source data instead.
"""

from jurisdiction.records import (
    CountryRecord,
    IntermediateRegionRecord,
    RegionRecord,
    SubRegionRecord,
)

SOURCE_SHA256 = "3cc5efc2c48415786951676e087548ff7ca02e8fa5397947c501e95c1431a432"

REGIONS: tuple[RegionRecord, ...] = (
    RegionRecord(2, "Africa"),
    RegionRecord(9, "Oceania"),
    RegionRecord(19, "Americas"),
    RegionRecord(142, "Asia"),
    RegionRecord(150, "Europe"),
)

SUB_REGIONS: tuple[SubRegionRecord, ...] = (
    SubRegionRecord(15, "Northern Africa", 2),
    SubRegionRecord(21, "Northern America", 19),
    SubRegionRecord(30, "Eastern Asia", 142),
    SubRegionRecord(34, "Southern Asia", 142),
    SubRegionRecord(35, "South-eastern Asia", 142),
    SubRegionRecord(39, "Southern Europe", 150),
    SubRegionRecord(53, "Australia and New Zealand", 9),
    SubRegionRecord(54, "Melanesia", 9),
    SubRegionRecord(57, "Micronesia", 9),
    SubRegionRecord(61, "Polynesia", 9),
    SubRegionRecord(143, "Central Asia", 142),
    SubRegionRecord(145, "Western Asia", 142),
    SubRegionRecord(151, "Eastern Europe", 150),
    SubRegionRecord(154, "Northern Europe", 150),
    SubRegionRecord(155, "Western Europe", 150),
    SubRegionRecord(202, "Sub-Saharan Africa", 2),
    SubRegionRecord(419, "Latin America and the Caribbean", 19),
)

INTERMEDIATE_REGIONS: tuple[IntermediateRegionRecord, ...] = (
    IntermediateRegionRecord(5, "South America", 419),
    IntermediateRegionRecord(11, "Western Africa", 202),
    IntermediateRegionRecord(13, "Central America", 419),
    IntermediateRegionRecord(14, "Eastern Africa", 202),
    IntermediateRegionRecord(17, "Middle Africa", 202),
    IntermediateRegionRecord(18, "Southern Africa", 202),
    IntermediateRegionRecord(29, "Caribbean", 419),
    IntermediateRegionRecord(830, "Channel Islands", 154),
)

# index, alpha-2, alpha-3, numeric, name, region, sub-region, intermediate region
COUNTRIES: tuple[CountryRecord, ...] = (
    CountryRecord(0, "AF", "AFG", 4, "Afghanistan", 142, 34, None),
    CountryRecord(1, "AX", "ALA", 248, "Åland Islands", 150, 154, None),
    CountryRecord(2, "AL", "ALB", 8, "Albania", 150, 39, None),
    CountryRecord(3, "DZ", "DZA", 12, "Algeria", 2, 15, None),
    CountryRecord(4, "AS", "ASM", 16, "American Samoa", 9, 61, None),
    CountryRecord(5, "AD", "AND", 20, "Andorra", 150, 39, None),
    CountryRecord(6, "AO", "AGO", 24, "Angola", 2, 202, 17),
    CountryRecord(7, "AI", "AIA", 660, "Anguilla", 19, 419, 29),
    CountryRecord(8, "AQ", "ATA", 10, "Antarctica", None, None, None),
    CountryRecord(9, "AG", "ATG", 28, "Antigua and Barbuda", 19, 419, 29),
    CountryRecord(10, "AR", "ARG", 32, "Argentina", 19, 419, 5),
    CountryRecord(11, "AM", "ARM", 51, "Armenia", 142, 145, None),
    CountryRecord(12, "AW", "ABW", 533, "Aruba", 19, 419, 29),
    CountryRecord(13, "AU", "AUS", 36, "Australia", 9, 53, None),
    CountryRecord(14, "AT", "AUT", 40, "Austria", 150, 155, None),
    CountryRecord(15, "AZ", "AZE", 31, "Azerbaijan", 142, 145, None),
    CountryRecord(16, "BS", "BHS", 44, "Bahamas", 19, 419, 29),
    CountryRecord(17, "BH", "BHR", 48, "Bahrain", 142, 145, None),
    CountryRecord(18, "BD", "BGD", 50, "Bangladesh", 142, 34, None),
    CountryRecord(19, "BB", "BRB", 52, "Barbados", 19, 419, 29),
    CountryRecord(20, "BY", "BLR", 112, "Belarus", 150, 151, None),
    CountryRecord(21, "BE", "BEL", 56, "Belgium", 150, 155, None),
    CountryRecord(22, "BZ", "BLZ", 84, "Belize", 19, 419, 13),
    CountryRecord(23, "BJ", "BEN", 204, "Benin", 2, 202, 11),
    CountryRecord(24, "BM", "BMU", 60, "Bermuda", 19, 21, None),
    CountryRecord(25, "BT", "BTN", 64, "Bhutan", 142, 34, None),
    CountryRecord(26, "BO", "BOL", 68, "Bolivia (Plurinational State of)", 19, 419, 5),
    CountryRecord(27, "BQ", "BES", 535, "Bonaire, Sint Eustatius and Saba", 19, 419, 29),
    CountryRecord(28, "BA", "BIH", 70, "Bosnia and Herzegovina", 150, 39, None),
    CountryRecord(29, "BW", "BWA", 72, "Botswana", 2, 202, 18),
    CountryRecord(30, "BV", "BVT", 74, "Bouvet Island", 19, 419, 5),
    CountryRecord(31, "BR", "BRA", 76, "Brazil", 19, 419, 5),
    CountryRecord(32, "IO", "IOT", 86, "British Indian Ocean Territory", 2, 202, 14),
    CountryRecord(33, "BN", "BRN", 96, "Brunei Darussalam", 142, 35, None),
    CountryRecord(34, "BG", "BGR", 100, "Bulgaria", 150, 151, None),
    CountryRecord(35, "BF", "BFA", 854, "Burkina Faso", 2, 202, 11),
    CountryRecord(36, "BI", "BDI", 108, "Burundi", 2, 202, 14),
    CountryRecord(37, "CV", "CPV", 132, "Cabo Verde", 2, 202, 11),
    CountryRecord(38, "KH", "KHM", 116, "Cambodia", 142, 35, None),
    CountryRecord(39, "CM", "CMR", 120, "Cameroon", 2, 202, 17),
    CountryRecord(40, "CA", "CAN", 124, "Canada", 19, 21, None),
    CountryRecord(41, "KY", "CYM", 136, "Cayman Islands", 19, 419, 29),
    CountryRecord(42, "CF", "CAF", 140, "Central African Republic", 2, 202, 17),
    CountryRecord(43, "TD", "TCD", 148, "Chad", 2, 202, 17),
    CountryRecord(44, "CL", "CHL", 152, "Chile", 19, 419, 5),
    CountryRecord(45, "CN", "CHN", 156, "China", 142, 30, None),
    CountryRecord(46, "CX", "CXR", 162, "Christmas Island", 9, 53, None),
    CountryRecord(47, "CC", "CCK", 166, "Cocos (Keeling) Islands", 9, 53, None),
    CountryRecord(48, "CO", "COL", 170, "Colombia", 19, 419, 5),
    CountryRecord(49, "KM", "COM", 174, "Comoros", 2, 202, 14),
    CountryRecord(50, "CG", "COG", 178, "Congo", 2, 202, 17),
    CountryRecord(51, "CD", "COD", 180, "Congo, Democratic Republic of the", 2, 202, 17),
    CountryRecord(52, "CK", "COK", 184, "Cook Islands", 9, 61, None),
    CountryRecord(53, "CR", "CRI", 188, "Costa Rica", 19, 419, 13),
    CountryRecord(54, "CI", "CIV", 384, "Côte d'Ivoire", 2, 202, 11),
    CountryRecord(55, "HR", "HRV", 191, "Croatia", 150, 39, None),
    CountryRecord(56, "CU", "CUB", 192, "Cuba", 19, 419, 29),
    CountryRecord(57, "CW", "CUW", 531, "Curaçao", 19, 419, 29),
    CountryRecord(58, "CY", "CYP", 196, "Cyprus", 142, 145, None),
    CountryRecord(59, "CZ", "CZE", 203, "Czechia", 150, 151, None),
    CountryRecord(60, "DK", "DNK", 208, "Denmark", 150, 154, None),
    CountryRecord(61, "DJ", "DJI", 262, "Djibouti", 2, 202, 14),
    CountryRecord(62, "DM", "DMA", 212, "Dominica", 19, 419, 29),
    CountryRecord(63, "DO", "DOM", 214, "Dominican Republic", 19, 419, 29),
    CountryRecord(64, "EC", "ECU", 218, "Ecuador", 19, 419, 5),
    CountryRecord(65, "EG", "EGY", 818, "Egypt", 2, 15, None),
    CountryRecord(66, "SV", "SLV", 222, "El Salvador", 19, 419, 13),
    CountryRecord(67, "GQ", "GNQ", 226, "Equatorial Guinea", 2, 202, 17),
    CountryRecord(68, "ER", "ERI", 232, "Eritrea", 2, 202, 14),
    CountryRecord(69, "EE", "EST", 233, "Estonia", 150, 154, None),
    CountryRecord(70, "SZ", "SWZ", 748, "Eswatini", 2, 202, 18),
    CountryRecord(71, "ET", "ETH", 231, "Ethiopia", 2, 202, 14),
    CountryRecord(72, "FK", "FLK", 238, "Falkland Islands (Malvinas)", 19, 419, 5),
    CountryRecord(73, "FO", "FRO", 234, "Faroe Islands", 150, 154, None),
    CountryRecord(74, "FJ", "FJI", 242, "Fiji", 9, 54, None),
    CountryRecord(75, "FI", "FIN", 246, "Finland", 150, 154, None),
    CountryRecord(76, "FR", "FRA", 250, "France", 150, 155, None),
    CountryRecord(77, "GF", "GUF", 254, "French Guiana", 19, 419, 5),
    CountryRecord(78, "PF", "PYF", 258, "French Polynesia", 9, 61, None),
    CountryRecord(79, "TF", "ATF", 260, "French Southern Territories", 2, 202, 14),
    CountryRecord(80, "GA", "GAB", 266, "Gabon", 2, 202, 17),
    CountryRecord(81, "GM", "GMB", 270, "Gambia", 2, 202, 11),
    CountryRecord(82, "GE", "GEO", 268, "Georgia", 142, 145, None),
    CountryRecord(83, "DE", "DEU", 276, "Germany", 150, 155, None),
    CountryRecord(84, "GH", "GHA", 288, "Ghana", 2, 202, 11),
    CountryRecord(85, "GI", "GIB", 292, "Gibraltar", 150, 39, None),
    CountryRecord(86, "GR", "GRC", 300, "Greece", 150, 39, None),
    CountryRecord(87, "GL", "GRL", 304, "Greenland", 19, 21, None),
    CountryRecord(88, "GD", "GRD", 308, "Grenada", 19, 419, 29),
    CountryRecord(89, "GP", "GLP", 312, "Guadeloupe", 19, 419, 29),
    CountryRecord(90, "GU", "GUM", 316, "Guam", 9, 57, None),
    CountryRecord(91, "GT", "GTM", 320, "Guatemala", 19, 419, 13),
    CountryRecord(92, "GG", "GGY", 831, "Guernsey", 150, 154, 830),
    CountryRecord(93, "GN", "GIN", 324, "Guinea", 2, 202, 11),
    CountryRecord(94, "GW", "GNB", 624, "Guinea-Bissau", 2, 202, 11),
    CountryRecord(95, "GY", "GUY", 328, "Guyana", 19, 419, 5),
    CountryRecord(96, "HT", "HTI", 332, "Haiti", 19, 419, 29),
    CountryRecord(97, "HM", "HMD", 334, "Heard Island and McDonald Islands", 9, 53, None),
    CountryRecord(98, "VA", "VAT", 336, "Holy See", 150, 39, None),
    CountryRecord(99, "HN", "HND", 340, "Honduras", 19, 419, 13),
    CountryRecord(100, "HK", "HKG", 344, "Hong Kong", 142, 30, None),
    CountryRecord(101, "HU", "HUN", 348, "Hungary", 150, 151, None),
    CountryRecord(102, "IS", "ISL", 352, "Iceland", 150, 154, None),
    CountryRecord(103, "IN", "IND", 356, "India", 142, 34, None),
    CountryRecord(104, "ID", "IDN", 360, "Indonesia", 142, 35, None),
    CountryRecord(105, "IR", "IRN", 364, "Iran (Islamic Republic of)", 142, 34, None),
    CountryRecord(106, "IQ", "IRQ", 368, "Iraq", 142, 145, None),
    CountryRecord(107, "IE", "IRL", 372, "Ireland", 150, 154, None),
    CountryRecord(108, "IM", "IMN", 833, "Isle of Man", 150, 154, None),
    CountryRecord(109, "IL", "ISR", 376, "Israel", 142, 145, None),
    CountryRecord(110, "IT", "ITA", 380, "Italy", 150, 39, None),
    CountryRecord(111, "JM", "JAM", 388, "Jamaica", 19, 419, 29),
    CountryRecord(112, "JP", "JPN", 392, "Japan", 142, 30, None),
    CountryRecord(113, "JE", "JEY", 832, "Jersey", 150, 154, 830),
    CountryRecord(114, "JO", "JOR", 400, "Jordan", 142, 145, None),
    CountryRecord(115, "KZ", "KAZ", 398, "Kazakhstan", 142, 143, None),
    CountryRecord(116, "KE", "KEN", 404, "Kenya", 2, 202, 14),
    CountryRecord(117, "KI", "KIR", 296, "Kiribati", 9, 57, None),
    CountryRecord(118, "KP", "PRK", 408, "Korea (Democratic People's Republic of)", 142, 30, None),
    CountryRecord(119, "KR", "KOR", 410, "Korea, Republic of", 142, 30, None),
    CountryRecord(120, "KW", "KWT", 414, "Kuwait", 142, 145, None),
    CountryRecord(121, "KG", "KGZ", 417, "Kyrgyzstan", 142, 143, None),
    CountryRecord(122, "LA", "LAO", 418, "Lao People's Democratic Republic", 142, 35, None),
    CountryRecord(123, "LV", "LVA", 428, "Latvia", 150, 154, None),
    CountryRecord(124, "LB", "LBN", 422, "Lebanon", 142, 145, None),
    CountryRecord(125, "LS", "LSO", 426, "Lesotho", 2, 202, 18),
    CountryRecord(126, "LR", "LBR", 430, "Liberia", 2, 202, 11),
    CountryRecord(127, "LY", "LBY", 434, "Libya", 2, 15, None),
    CountryRecord(128, "LI", "LIE", 438, "Liechtenstein", 150, 155, None),
    CountryRecord(129, "LT", "LTU", 440, "Lithuania", 150, 154, None),
    CountryRecord(130, "LU", "LUX", 442, "Luxembourg", 150, 155, None),
    CountryRecord(131, "MO", "MAC", 446, "Macao", 142, 30, None),
    CountryRecord(132, "MG", "MDG", 450, "Madagascar", 2, 202, 14),
    CountryRecord(133, "MW", "MWI", 454, "Malawi", 2, 202, 14),
    CountryRecord(134, "MY", "MYS", 458, "Malaysia", 142, 35, None),
    CountryRecord(135, "MV", "MDV", 462, "Maldives", 142, 34, None),
    CountryRecord(136, "ML", "MLI", 466, "Mali", 2, 202, 11),
    CountryRecord(137, "MT", "MLT", 470, "Malta", 150, 39, None),
    CountryRecord(138, "MH", "MHL", 584, "Marshall Islands", 9, 57, None),
    CountryRecord(139, "MQ", "MTQ", 474, "Martinique", 19, 419, 29),
    CountryRecord(140, "MR", "MRT", 478, "Mauritania", 2, 202, 11),
    CountryRecord(141, "MU", "MUS", 480, "Mauritius", 2, 202, 14),
    CountryRecord(142, "YT", "MYT", 175, "Mayotte", 2, 202, 14),
    CountryRecord(143, "MX", "MEX", 484, "Mexico", 19, 419, 13),
    CountryRecord(144, "FM", "FSM", 583, "Micronesia (Federated States of)", 9, 57, None),
    CountryRecord(145, "MD", "MDA", 498, "Moldova, Republic of", 150, 151, None),
    CountryRecord(146, "MC", "MCO", 492, "Monaco", 150, 155, None),
    CountryRecord(147, "MN", "MNG", 496, "Mongolia", 142, 30, None),
    CountryRecord(148, "ME", "MNE", 499, "Montenegro", 150, 39, None),
    CountryRecord(149, "MS", "MSR", 500, "Montserrat", 19, 419, 29),
    CountryRecord(150, "MA", "MAR", 504, "Morocco", 2, 15, None),
    CountryRecord(151, "MZ", "MOZ", 508, "Mozambique", 2, 202, 14),
    CountryRecord(152, "MM", "MMR", 104, "Myanmar", 142, 35, None),
    CountryRecord(153, "NA", "NAM", 516, "Namibia", 2, 202, 18),
    CountryRecord(154, "NR", "NRU", 520, "Nauru", 9, 57, None),
    CountryRecord(155, "NP", "NPL", 524, "Nepal", 142, 34, None),
    CountryRecord(156, "NL", "NLD", 528, "Netherlands, Kingdom of the", 150, 155, None),
    CountryRecord(157, "NC", "NCL", 540, "New Caledonia", 9, 54, None),
    CountryRecord(158, "NZ", "NZL", 554, "New Zealand", 9, 53, None),
    CountryRecord(159, "NI", "NIC", 558, "Nicaragua", 19, 419, 13),
    CountryRecord(160, "NE", "NER", 562, "Niger", 2, 202, 11),
    CountryRecord(161, "NG", "NGA", 566, "Nigeria", 2, 202, 11),
    CountryRecord(162, "NU", "NIU", 570, "Niue", 9, 61, None),
    CountryRecord(163, "NF", "NFK", 574, "Norfolk Island", 9, 53, None),
    CountryRecord(164, "MK", "MKD", 807, "North Macedonia", 150, 39, None),
    CountryRecord(165, "MP", "MNP", 580, "Northern Mariana Islands", 9, 57, None),
    CountryRecord(166, "NO", "NOR", 578, "Norway", 150, 154, None),
    CountryRecord(167, "OM", "OMN", 512, "Oman", 142, 145, None),
    CountryRecord(168, "PK", "PAK", 586, "Pakistan", 142, 34, None),
    CountryRecord(169, "PW", "PLW", 585, "Palau", 9, 57, None),
    CountryRecord(170, "PS", "PSE", 275, "Palestine, State of", 142, 145, None),
    CountryRecord(171, "PA", "PAN", 591, "Panama", 19, 419, 13),
    CountryRecord(172, "PG", "PNG", 598, "Papua New Guinea", 9, 54, None),
    CountryRecord(173, "PY", "PRY", 600, "Paraguay", 19, 419, 5),
    CountryRecord(174, "PE", "PER", 604, "Peru", 19, 419, 5),
    CountryRecord(175, "PH", "PHL", 608, "Philippines", 142, 35, None),
    CountryRecord(176, "PN", "PCN", 612, "Pitcairn", 9, 61, None),
    CountryRecord(177, "PL", "POL", 616, "Poland", 150, 151, None),
    CountryRecord(178, "PT", "PRT", 620, "Portugal", 150, 39, None),
    CountryRecord(179, "PR", "PRI", 630, "Puerto Rico", 19, 419, 29),
    CountryRecord(180, "QA", "QAT", 634, "Qatar", 142, 145, None),
    CountryRecord(181, "RE", "REU", 638, "Réunion", 2, 202, 14),
    CountryRecord(182, "RO", "ROU", 642, "Romania", 150, 151, None),
    CountryRecord(183, "RU", "RUS", 643, "Russian Federation", 150, 151, None),
    CountryRecord(184, "RW", "RWA", 646, "Rwanda", 2, 202, 14),
    CountryRecord(185, "BL", "BLM", 652, "Saint Barthélemy", 19, 419, 29),
    CountryRecord(186, "SH", "SHN", 654, "Saint Helena, Ascension and Tristan da Cunha", 2, 202, 11),
    CountryRecord(187, "KN", "KNA", 659, "Saint Kitts and Nevis", 19, 419, 29),
    CountryRecord(188, "LC", "LCA", 662, "Saint Lucia", 19, 419, 29),
    CountryRecord(189, "MF", "MAF", 663, "Saint Martin (French part)", 19, 419, 29),
    CountryRecord(190, "PM", "SPM", 666, "Saint Pierre and Miquelon", 19, 21, None),
    CountryRecord(191, "VC", "VCT", 670, "Saint Vincent and the Grenadines", 19, 419, 29),
    CountryRecord(192, "WS", "WSM", 882, "Samoa", 9, 61, None),
    CountryRecord(193, "SM", "SMR", 674, "San Marino", 150, 39, None),
    CountryRecord(194, "ST", "STP", 678, "Sao Tome and Principe", 2, 202, 17),
    CountryRecord(195, "SA", "SAU", 682, "Saudi Arabia", 142, 145, None),
    CountryRecord(196, "SN", "SEN", 686, "Senegal", 2, 202, 11),
    CountryRecord(197, "RS", "SRB", 688, "Serbia", 150, 39, None),
    CountryRecord(198, "SC", "SYC", 690, "Seychelles", 2, 202, 14),
    CountryRecord(199, "SL", "SLE", 694, "Sierra Leone", 2, 202, 11),
    CountryRecord(200, "SG", "SGP", 702, "Singapore", 142, 35, None),
    CountryRecord(201, "SX", "SXM", 534, "Sint Maarten (Dutch part)", 19, 419, 29),
    CountryRecord(202, "SK", "SVK", 703, "Slovakia", 150, 151, None),
    CountryRecord(203, "SI", "SVN", 705, "Slovenia", 150, 39, None),
    CountryRecord(204, "SB", "SLB", 90, "Solomon Islands", 9, 54, None),
    CountryRecord(205, "SO", "SOM", 706, "Somalia", 2, 202, 14),
    CountryRecord(206, "ZA", "ZAF", 710, "South Africa", 2, 202, 18),
    CountryRecord(207, "GS", "SGS", 239, "South Georgia and the South Sandwich Islands", 19, 419, 5),
    CountryRecord(208, "SS", "SSD", 728, "South Sudan", 2, 202, 14),
    CountryRecord(209, "ES", "ESP", 724, "Spain", 150, 39, None),
    CountryRecord(210, "LK", "LKA", 144, "Sri Lanka", 142, 34, None),
    CountryRecord(211, "SD", "SDN", 729, "Sudan", 2, 15, None),
    CountryRecord(212, "SR", "SUR", 740, "Suriname", 19, 419, 5),
    CountryRecord(213, "SJ", "SJM", 744, "Svalbard and Jan Mayen", 150, 154, None),
    CountryRecord(214, "SE", "SWE", 752, "Sweden", 150, 154, None),
    CountryRecord(215, "CH", "CHE", 756, "Switzerland", 150, 155, None),
    CountryRecord(216, "SY", "SYR", 760, "Syrian Arab Republic", 142, 145, None),
    CountryRecord(217, "TW", "TWN", 158, "Taiwan, Province of China", 142, 30, None),
    CountryRecord(218, "TJ", "TJK", 762, "Tajikistan", 142, 143, None),
    CountryRecord(219, "TZ", "TZA", 834, "Tanzania, United Republic of", 2, 202, 14),
    CountryRecord(220, "TH", "THA", 764, "Thailand", 142, 35, None),
    CountryRecord(221, "TL", "TLS", 626, "Timor-Leste", 142, 35, None),
    CountryRecord(222, "TG", "TGO", 768, "Togo", 2, 202, 11),
    CountryRecord(223, "TK", "TKL", 772, "Tokelau", 9, 61, None),
    CountryRecord(224, "TO", "TON", 776, "Tonga", 9, 61, None),
    CountryRecord(225, "TT", "TTO", 780, "Trinidad and Tobago", 19, 419, 29),
    CountryRecord(226, "TN", "TUN", 788, "Tunisia", 2, 15, None),
    CountryRecord(227, "TR", "TUR", 792, "Türkiye", 142, 145, None),
    CountryRecord(228, "TM", "TKM", 795, "Turkmenistan", 142, 143, None),
    CountryRecord(229, "TC", "TCA", 796, "Turks and Caicos Islands", 19, 419, 29),
    CountryRecord(230, "TV", "TUV", 798, "Tuvalu", 9, 61, None),
    CountryRecord(231, "UG", "UGA", 800, "Uganda", 2, 202, 14),
    CountryRecord(232, "UA", "UKR", 804, "Ukraine", 150, 151, None),
    CountryRecord(233, "AE", "ARE", 784, "United Arab Emirates", 142, 145, None),
    CountryRecord(234, "GB", "GBR", 826, "United Kingdom of Great Britain and Northern Ireland", 150, 154, None),
    CountryRecord(235, "US", "USA", 840, "United States of America", 19, 21, None),
    CountryRecord(236, "UM", "UMI", 581, "United States Minor Outlying Islands", 9, 57, None),
    CountryRecord(237, "UY", "URY", 858, "Uruguay", 19, 419, 5),
    CountryRecord(238, "UZ", "UZB", 860, "Uzbekistan", 142, 143, None),
    CountryRecord(239, "VU", "VUT", 548, "Vanuatu", 9, 54, None),
    CountryRecord(240, "VE", "VEN", 862, "Venezuela (Bolivarian Republic of)", 19, 419, 5),
    CountryRecord(241, "VN", "VNM", 704, "Viet Nam", 142, 35, None),
    CountryRecord(242, "VG", "VGB", 92, "Virgin Islands (British)", 19, 419, 29),
    CountryRecord(243, "VI", "VIR", 850, "Virgin Islands (U.S.)", 19, 419, 29),
    CountryRecord(244, "WF", "WLF", 876, "Wallis and Futuna", 9, 61, None),
    CountryRecord(245, "EH", "ESH", 732, "Western Sahara", 2, 15, None),
    CountryRecord(246, "YE", "YEM", 887, "Yemen", 142, 145, None),
    CountryRecord(247, "ZM", "ZMB", 894, "Zambia", 2, 202, 14),
    CountryRecord(248, "ZW", "ZWE", 716, "Zimbabwe", 2, 202, 14),
)

# alpha-2 -> canonical index of codes no longer in the source
RETIRED: dict[str, int] = {}
