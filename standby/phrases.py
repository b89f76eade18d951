"""Multilingual "one more" phrases for the almost-full queue teaser."""

import random


# (phrase, language) pairs.
ONE_MORE_PHRASES = (
    ("One more", "English"),
    ("Uno más", "Spanish"),
    ("Un de plus", "French"),
    ("Noch einer", "German"),
    ("Еще один", "Russian"),
    ("Ancora uno", "Italian"),
    ("Mais um", "Portuguese"),
    ("Jeszcze jeden", "Polish"),
    ("Încă unul", "Romanian"),
    ("Ще один", "Ukrainian"),
    ("Ještě jeden", "Czech"),
    ("Ešte jeden", "Slovak"),
    ("Još jedan", "Croatian/Serbian/Bosnian"),
    ("Още един", "Bulgarian"),
    ("Ένας ακόμα", "Greek"),
    ("Een meer", "Dutch"),
    ("En till", "Swedish"),
    ("En til", "Norwegian"),
    ("Én mere", "Danish"),
    ("Yksi lisää", "Finnish"),
    ("Még egy", "Hungarian"),
    ("Vienas daugiau", "Lithuanian"),
    ("Vēl viens", "Latvian"),
    ("Üks veel", "Estonian"),
    ("Eitt til", "Icelandic"),
    ("یکی دیگر", "Persian"),
    ("एक और", "Hindi"),
    ("আরও একটি", "Bengali"),
    ("ایک اور", "Urdu"),
    ("ਇੱਕ ਹੋਰ", "Punjabi"),
    ("એક વધુ", "Gujarati"),
    ("ಇನ್ನೂ ಒಂದು", "Kannada"),
    ("ఇంకా ఒకటి", "Telugu"),
    ("இன்னும் ஒன்று", "Tamil"),
    ("ഒന്നുകൂടി", "Malayalam"),
    ("තවත් එකක්", "Sinhala"),
    ("再来一个", "Chinese Simplified"),
    ("再來一個", "Chinese Traditional"),
    ("もう一つ", "Japanese"),
    ("하나 더", "Korean"),
    ("နောက်တစ်ခု", "Burmese"),
    ("ཡང་གཅིག", "Tibetan"),
    ("עוד אחד", "Hebrew"),
    ("واحد آخر", "Arabic"),
    ("ሌላ አንድ", "Amharic"),
    ("Bir tane daha", "Turkish"),
    ("Тағы бір", "Kazakh"),
    ("Yana bitta", "Uzbek"),
    ("Дагы бир", "Kyrgyz"),
    ("Yana bir", "Azerbaijani"),
    ("Тагы бер", "Tatar"),
    ("Ọkan sii", "Yoruba"),
    ("Otu ọzọ", "Igbo"),
    ("Chimodzi china", "Chichewa"),
    ("Bumwe", "Shona"),
    ("Moja zaidi", "Swahili"),
    ("E nngwe", "Tswana"),
    ("Eyinye", "Xhosa"),
    ("Enye eyengeziwe", "Zulu"),
    ("Isa pa", "Tagalog/Filipino"),
    ("Satu lagi", "Indonesian/Malay"),
    ("Isa pa", "Cebuano"),
    ("Tasi tano", "Chamorro"),
    ("Kotahi anō", "Maori"),
    ("E tasi atu", "Samoan"),
    ("E taha tale", "Fijian"),
    ("Hoʻokahi hou", "Hawaiian"),
    ("Še jeden", "Slovenian"),
    ("ಇನ್ನೊಂದು", "Kannada"),
    ("மேலும் ஒன்று", "Tamil"),
    ("Unu pli", "Esperanto"),
    ("Unu pluse", "Interlingua"),
    ("មួយទៀត", "Khmer"),
    ("ອີກອັນນຶ່ງ", "Lao"),
    ("Thêm một", "Vietnamese"),
    ("อีกหนึ่ง", "Thai"),
    ("ちゅーてぃー", "Okinawan"),
    ("한 개 더", "Korean"),
    ("Дахиад нэг", "Mongolian"),
    ("Un arall", "Welsh"),
    ("Aon eile", "Irish"),
    ("Aon eile", "Scottish Gaelic"),
    ("Unnane", "Manx"),
    ("Dar vienas", "Lithuanian"),
    ("Edhe një", "Albanian"),
    ("ԵՒս մեկ", "Armenian"),
    ("კიდევ ერთი", "Georgian"),
    ("Bat gehiago", "Basque"),
    ("Wieħed ieħor", "Maltese"),
    ("Nog een", "Afrikaans"),
    ("Wan moa", "Jamaican Patois"),
    ("Un altro", "Corsican"),
    ("Unu más", "Galician"),
    ("Un autre", "French Canadian"),
    ("Unu di più", "Sicilian"),
    ("Un més", "Catalan"),
    ("Яшчэ адзін", "Belarusian"),
    ("Уште еден", "Macedonian"),
    ("Nach een", "Luxembourgish"),
    ("Noch ien", "West Frisian"),
    ("Ɗaya kuma", "Hausa"),
    ("Mid kale", "Somali"),
    ("Iray hafa", "Malagasy"),
    ("अर्को एक", "Nepali"),
    ("आणखी एक", "Marathi"),
    ("Youn ankò", "Haitian Creole"),
    ("Siji maneh", "Javanese"),
    ("Hiji deui", "Sundanese"),
    ("Yekî din", "Kurmanji"),
    ("Wanpela moa", "Tok Pisin"),
    ("Unus amplius", "Latin"),
    ("Kimoja zaidi", "Swahili (object)"),
    ("Bir daha", "Turkmen"),
    ("Још један", "Serbian Cyrillic"),
    ("Unu mais", "Sardinian"),
)


def random_one_more():
    """Returns a random (phrase, language) pair, picked uniformly."""
    return random.choice(ONE_MORE_PHRASES)
