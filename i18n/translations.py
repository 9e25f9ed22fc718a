# i18n/translations.py

DEFAULT_LANGUAGE = "en"

LANGUAGE_NAMES = {
    "en": "English",
    "es": "Español",
}

TRANSLATIONS = {
    "en": {
        # shell
        "nav.dashboard": "Dashboard",
        "nav.foodbanks": "Food Banks",
        "nav.visits": "Visits",
        "nav.items": "Items",
        "nav.logout": "Logout",
        "home.welcome": "Welcome to the Food Bank Management App!",

        # login
        "login.title": "Login",
        "login.submit": "Login",
        "login.failed": "Invalid email or password",
        "login.forgot": "Forgot your password?",
        "misc.password": "Password",

        # password reset
        "reset.title": "Reset Password",
        "reset.submit": "Send Reset Email",
        "reset.sent": "Password reset email sent. Please check your inbox.",
        "reset.failed": "Failed to send password reset email. Please try again.",
        "reset.newpassword": "New Password",
        "reset.setpassword": "Set Password",
        "reset.done": "Your password has been reset. You can now log in.",
        "reset.setfailed": "Failed to reset your password. The link may have expired.",

        # signup
        "signup.title": "Community Cupboard Sign-Up Form",
        "signup.intro": "This information is helpful in providing our services. None of your information will be shared.",
        "signup.success": "We have saved your information. Please ask for a shopping sheet from a staff member.",
        "signup.hoh": "Head of Household",
        "signup.othermembers": "Others Living in the Household",
        "signup.addmember": "Add Household Member",
        "signup.removemember": "Remove",

        # fields
        "misc.firstname": "First Name",
        "misc.lastname": "Last Name",
        "misc.address": "Address",
        "misc.city": "City",
        "misc.zipcode": "ZIP Code",
        "misc.email": "Email",
        "misc.phone": "Phone",
        "misc.gender": "Gender",
        "misc.male": "Male",
        "misc.female": "Female",
        "misc.prefernottosay": "Prefer not to say",
        "misc.dob": "Date of Birth",
        "misc.month": "Month",
        "misc.day": "Day",
        "misc.year": "Year",
        "misc.primarylang": "Primary Language",
        "misc.english": "English",
        "misc.spanish": "Spanish",
        "misc.other": "Other",
        "misc.relationship": "Relationship",
        "misc.child": "Child",
        "misc.grandchild": "Grandchild",
        "misc.spouse": "Spouse",
        "misc.parent": "Parent",
        "misc.grandparent": "Grandparent",
        "misc.sibling": "Sibling",
        "misc.friend": "Friend",
        "misc.race": "Race",
        "misc.race.white": "White/Anglo",
        "misc.race.latino": "Latina/Latino",
        "misc.race.black": "Black/African American",
        "misc.race.asian": "Asian/Pacific Islander",
        "misc.fieldrequired": "This field is required",
        "misc.submit": "Submit",
        "misc.thankyou": "Thank You",
        "misc.error": "An error occurred",
        "misc.select": "Select...",
    },
    "es": {
        "nav.dashboard": "Panel",
        "nav.foodbanks": "Bancos de Alimentos",
        "nav.visits": "Visitas",
        "nav.items": "Artículos",
        "nav.logout": "Cerrar Sesión",
        "home.welcome": "¡Bienvenido a la aplicación de gestión del banco de alimentos!",

        "login.title": "Iniciar Sesión",
        "login.submit": "Iniciar Sesión",
        "login.failed": "Correo electrónico o contraseña no válidos",
        "login.forgot": "¿Olvidó su contraseña?",
        "misc.password": "Contraseña",

        "reset.title": "Restablecer Contraseña",
        "reset.submit": "Enviar Correo de Restablecimiento",
        "reset.sent": "Correo de restablecimiento enviado. Por favor revise su bandeja de entrada.",
        "reset.failed": "No se pudo enviar el correo de restablecimiento. Por favor intente de nuevo.",
        "reset.newpassword": "Nueva Contraseña",
        "reset.setpassword": "Guardar Contraseña",
        "reset.done": "Su contraseña ha sido restablecida. Ya puede iniciar sesión.",
        "reset.setfailed": "No se pudo restablecer su contraseña. Es posible que el enlace haya expirado.",

        "signup.title": "Formulario de Inscripción de Community Cupboard",
        "signup.intro": "Esta información es útil para proporcionar nuestros servicios. Su información no será compartida.",
        "signup.success": "Hemos guardado su información. Por favor, solicite una hoja de compras a un miembro del personal.",
        "signup.hoh": "Cabeza de Familia",
        "signup.othermembers": "Otras Personas en el Hogar",
        "signup.addmember": "Agregar Miembro del Hogar",
        "signup.removemember": "Quitar",

        "misc.firstname": "Nombre",
        "misc.lastname": "Apellido",
        "misc.address": "Dirección",
        "misc.city": "Ciudad",
        "misc.zipcode": "Código Postal",
        "misc.email": "Correo Electrónico",
        "misc.phone": "Teléfono",
        "misc.gender": "Género",
        "misc.male": "Masculino",
        "misc.female": "Femenino",
        "misc.prefernottosay": "Prefiero no decir",
        "misc.dob": "Fecha de Nacimiento",
        "misc.month": "Mes",
        "misc.day": "Día",
        "misc.year": "Año",
        "misc.primarylang": "Idioma Principal",
        "misc.english": "Inglés",
        "misc.spanish": "Español",
        "misc.other": "Otro",
        "misc.relationship": "Relación",
        "misc.child": "Hijo/a",
        "misc.grandchild": "Nieto/a",
        "misc.spouse": "Esposo/a",
        "misc.parent": "Padre/Madre",
        "misc.grandparent": "Abuelo/a",
        "misc.sibling": "Hermano/a",
        "misc.friend": "Amigo/a",
        "misc.race": "Raza",
        "misc.race.white": "Blanco/Anglo",
        "misc.race.latino": "Latina/Latino",
        "misc.race.black": "Negro/Afroamericano",
        "misc.race.asian": "Asiático/Isleño del Pacífico",
        "misc.fieldrequired": "Este campo es obligatorio",
        "misc.submit": "Enviar",
        "misc.thankyou": "Gracias",
        "misc.error": "Ocurrió un error",
        "misc.select": "Seleccionar...",
    },
}
