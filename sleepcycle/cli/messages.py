"""
User-facing CLI strings in every supported language.
"""

from typing import Dict

DEFAULT_LANGUAGE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "app_subtitle": "Optimize your sleep cycles",
        "bedtime": "Bedtime",
        "wake_up_time": "Wake Up Time",
        "cycle_info": "A complete sleep cycle is {cycle} minutes. We'll add {latency} minutes for you to fall asleep.",
        "optimal_wake_times": "Optimal Wake Times",
        "optimal_bedtimes": "Optimal Bedtimes",
        "choose_wake_time": "Choose a wake time that completes full REM cycles",
        "choose_bedtime": "Choose a bedtime to wake up refreshed",
        "recommended": "RECOMMENDED",
        "complete_cycles": "complete cycles",
        "of_sleep": "of sleep",
        "missing_info": "Missing Information",
        "enter_both_times": "Please enter both sleep and wake times",
        "enter_wake_time": "Please enter your wake time",
        "not_enough_sleep": "Not Enough Sleep",
        "time_window_short": "The time window is too short for optimal REM cycles. Try going to sleep earlier or waking up later.",
        "set_alarm_for": "Set your alarm for",
        "enter_time": "Enter time (HH:MM)",
    },
    "es": {
        "app_subtitle": "Optimiza tus ciclos de sueño",
        "bedtime": "Hora de dormir",
        "wake_up_time": "Hora de despertar",
        "cycle_info": "Un ciclo de sueño completo dura {cycle} minutos. Añadiremos {latency} minutos para que te duermas.",
        "optimal_wake_times": "Horas óptimas para despertar",
        "optimal_bedtimes": "Horas óptimas para dormir",
        "choose_wake_time": "Elige una hora que complete ciclos REM completos",
        "choose_bedtime": "Elige una hora para despertar descansado",
        "recommended": "RECOMENDADO",
        "complete_cycles": "ciclos completos",
        "of_sleep": "de sueño",
        "missing_info": "Falta información",
        "enter_both_times": "Por favor ingresa ambas horas",
        "enter_wake_time": "Por favor ingresa tu hora de despertar",
        "not_enough_sleep": "No es suficiente sueño",
        "time_window_short": "El tiempo es muy corto para ciclos REM óptimos. Intenta dormir más temprano o despertar más tarde.",
        "set_alarm_for": "Configura tu alarma para las",
        "enter_time": "Ingresar hora (HH:MM)",
    },
    "it": {
        "app_subtitle": "Ottimizza i tuoi cicli del sonno",
        "bedtime": "Ora di andare a letto",
        "wake_up_time": "Ora di sveglia",
        "cycle_info": "Un ciclo di sonno completo dura {cycle} minuti. Aggiungeremo {latency} minuti per addormentarsi.",
        "optimal_wake_times": "Orari ottimali per svegliarsi",
        "optimal_bedtimes": "Orari ottimali per dormire",
        "choose_wake_time": "Scegli un orario che completi cicli REM completi",
        "choose_bedtime": "Scegli un orario per svegliarti riposato",
        "recommended": "CONSIGLIATO",
        "complete_cycles": "cicli completi",
        "of_sleep": "di sonno",
        "missing_info": "Informazioni mancanti",
        "enter_both_times": "Inserisci entrambi gli orari",
        "enter_wake_time": "Inserisci il tuo orario di sveglia",
        "not_enough_sleep": "Sonno insufficiente",
        "time_window_short": "Il tempo è troppo breve per cicli REM ottimali. Prova ad andare a letto prima o svegliarti più tardi.",
        "set_alarm_for": "Imposta la sveglia per le",
        "enter_time": "Inserisci ora (HH:MM)",
    },
    "pt": {
        "app_subtitle": "Otimize seus ciclos de sono",
        "bedtime": "Hora de dormir",
        "wake_up_time": "Hora de acordar",
        "cycle_info": "Um ciclo de sono completo dura {cycle} minutos. Vamos adicionar {latency} minutos para você adormecer.",
        "optimal_wake_times": "Horários ideais para acordar",
        "optimal_bedtimes": "Horários ideais para dormir",
        "choose_wake_time": "Escolha um horário que complete ciclos REM completos",
        "choose_bedtime": "Escolha um horário para acordar descansado",
        "recommended": "RECOMENDADO",
        "complete_cycles": "ciclos completos",
        "of_sleep": "de sono",
        "missing_info": "Informação faltando",
        "enter_both_times": "Por favor insira ambos os horários",
        "enter_wake_time": "Por favor insira seu horário de acordar",
        "not_enough_sleep": "Sono insuficiente",
        "time_window_short": "O tempo é muito curto para ciclos REM ideais. Tente dormir mais cedo ou acordar mais tarde.",
        "set_alarm_for": "Configure seu alarme para",
        "enter_time": "Inserir hora (HH:MM)",
    },
}


def translate(key: str, language: str = DEFAULT_LANGUAGE, **kwargs: object) -> str:
    """
    Look up a message, falling back to English and then to the key itself.
    """
    table = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    message = table.get(key) or MESSAGES[DEFAULT_LANGUAGE].get(key) or key
    return message.format(**kwargs) if kwargs else message
