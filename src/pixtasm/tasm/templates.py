"""
Fixed TASM program text wrapped around generated code.

These strings are part of the output contract: downstream assemblers
expect exactly these macro names and parameter orders. Treat them as
read-only; generated declarations are spliced into copies.
"""

MACROS = """
putc MACRO char
    mov ah, 02h
    mov dl, char
    int 21h
ENDM
renderc MACRO char, page, color, write
    mov ah, 09h 
    mov al, char
    mov bh, page
    mov bl, color
    mov cx, write
    int 10h
ENDM
setcursor MACRO row, col
    mov ah, 02h
    mov bh, 00h
    mov dh, row
    mov dl, col
    int 10h
ENDM
colorz MACRO color, write
    mov ah, 09h 
    mov bl, color
    mov cx, write
    int 10h
ENDM
.model small
.data
.code
"""

PREAMBLE = MACROS + """
.stack 100h
start :
    mov ax, @data
    mov ds, ax

    ; Set to video mode 
    mov ah, 00h
    mov al, 03h ; 80x25 color text mode
    int 10h

"""

POSTAMBLE = """
    mov ah, 4Ch      ; DOS exit function
    mov al, 0        ; Return code 0
    int 21h          ; Call DOS interrupt
end start ; end program
"""

# String declarations go right after the last occurrence of this line
DATA_MARKER = ".data\n"

STRING_TERMINATOR = "'$'"
